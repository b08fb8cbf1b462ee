"""
Tests for gameplay action links and export planning.

Run with: pytest tests/test_actions.py -v
"""

from rigmap.animation import (
    PlayerAction,
    PLAYER_ACTIONS,
    initial_animation_links,
    export_name,
    plan_export,
)


class TestPlayerActions:
    """Action vocabulary."""

    def test_all_actions_listed(self):
        assert len(PLAYER_ACTIONS) == 11
        assert len(set(PLAYER_ACTIONS)) == 11
        assert PlayerAction.STRAFE_LEFT in PLAYER_ACTIONS

    def test_initial_links_empty(self):
        links = initial_animation_links()
        assert list(links) == PLAYER_ACTIONS
        assert all(clip is None for clip in links.values())

    def test_export_name_lowercases(self):
        assert export_name(PlayerAction.STRAFE_LEFT) == "strafeleft"
        assert export_name(PlayerAction.IDLE) == "idle"


class TestPlanExport:
    """Choosing and naming exported clips."""

    def test_selected_clips_exported_as_is(self, make_clip):
        walk = make_clip(["A"], name="anims | Walk")
        exported = plan_export([walk], ["anims | Walk"], initial_animation_links())
        assert exported == [walk]

    def test_linked_clips_renamed(self, make_clip):
        walk = make_clip(["A"], name="anims | Walk", from_frame=0.0, to_frame=24.0)
        links = initial_animation_links()
        links[PlayerAction.WALK] = "anims | Walk"

        exported = plan_export([walk], [], links)
        assert [c.name for c in exported] == ["walk"]
        assert exported[0].tracks == walk.tracks
        assert exported[0].to_frame == 24.0
        assert walk.name == "anims | Walk"

    def test_selected_then_linked_without_duplicates(self, make_clip):
        clips = [make_clip(["A"], name=n) for n in ("a", "b", "c")]
        links = initial_animation_links()
        links[PlayerAction.RUN] = "c"
        links[PlayerAction.IDLE] = "a"

        exported = plan_export(clips, ["b", "a"], links)
        assert [c.name for c in exported] == ["b", "idle", "run"]

    def test_unknown_names_skipped(self, make_clip):
        clips = [make_clip(["A"], name="a")]
        links = initial_animation_links()
        links[PlayerAction.RUN] = "gone"
        assert [c.name for c in plan_export(clips, ["missing", "a"], links)] == ["a"]

    def test_last_action_wins(self, make_clip):
        clips = [make_clip(["A"], name="a")]
        links = {PlayerAction.WALK: "a", PlayerAction.RUN: "a"}
        assert [c.name for c in plan_export(clips, [], links)] == ["run"]

    def test_nothing_selected(self, make_clip):
        clips = [make_clip(["A"], name="a")]
        assert plan_export(clips, [], initial_animation_links()) == []
