from mazechase.actors import Adversary, AdversaryMode, Identity
from mazechase.modes import ModeController


def advance(modes, n):
    for _ in range(n):
        modes.advance()


def test_starts_in_scatter():
    assert ModeController().mode is AdversaryMode.SCATTER


def test_scatter_switches_to_chase_once():
    modes = ModeController(fps=4, scatter_seconds=2)
    advance(modes, 7)
    assert modes.mode is AdversaryMode.SCATTER
    advance(modes, 1)
    assert modes.mode is AdversaryMode.CHASE
    advance(modes, 100)
    assert modes.mode is AdversaryMode.CHASE


def test_default_switch_after_seven_seconds():
    modes = ModeController()
    advance(modes, 7 * 60 - 1)
    assert modes.mode is AdversaryMode.SCATTER
    advance(modes, 1)
    assert modes.mode is AdversaryMode.CHASE


def test_movement_steps_every_tenth_frame():
    modes = ModeController(fps=60, step_frames=10)
    steps = [i + 1 for i in range(60) if modes.advance()]
    assert steps == [10, 20, 30, 40, 50, 60]


def test_frightened_counts_down_once_per_second():
    modes = ModeController(fps=4, frightened_seconds=3, scatter_seconds=100)
    modes.frighten()
    assert modes.mode is AdversaryMode.FRIGHTENED
    advance(modes, 4)
    assert modes.frightened_remaining == 2
    advance(modes, 7)
    assert modes.mode is AdversaryMode.FRIGHTENED
    advance(modes, 1)
    assert modes.frightened_remaining == 0
    assert modes.mode is AdversaryMode.CHASE


def test_refrighten_resets_without_stacking():
    modes = ModeController(fps=4, frightened_seconds=3)
    modes.frighten()
    advance(modes, 4)
    modes.frighten()
    assert modes.frightened_remaining == 3
    modes.frighten()
    assert modes.frightened_remaining == 3


def test_frightened_preempts_chase():
    modes = ModeController(fps=2, scatter_seconds=1)
    advance(modes, 2)
    assert modes.mode is AdversaryMode.CHASE
    modes.frighten()
    assert modes.mode is AdversaryMode.FRIGHTENED


def test_apply_updates_every_adversary():
    modes = ModeController()
    ghosts = [Adversary(identity, (1, 1)) for identity in Identity]
    modes.frighten()
    modes.apply(ghosts)
    assert {g.mode for g in ghosts} == {AdversaryMode.FRIGHTENED}
    assert {g.icon for g in ghosts} == {"X"}

    modes.frightened_remaining = 0
    modes.chasing = True
    modes.apply(ghosts)
    assert [g.icon for g in ghosts] == ["B", "P", "I", "C"]
    assert {g.mode for g in ghosts} == {AdversaryMode.CHASE}
