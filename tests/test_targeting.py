import pytest

from mazechase.grid import Direction
from mazechase.targeting import (
    AdversaryMode, Identity, TargetContext, ahead_of_player, scatter_corner, target_for,
)


def ctx(player=(10, 10), facing=Direction.LEFT, blinky=(4, 20), position=(20, 20), **kw):
    return TargetContext(rows=32, cols=40, position=position, player_pos=player,
                         player_facing=facing, blinky_pos=blinky, **kw)


def chase(identity, context):
    return target_for(identity, AdversaryMode.CHASE, context)


@pytest.mark.parametrize("identity, corner", [
    (Identity.BLINKY, (1, 38)),
    (Identity.PINKY, (1, 1)),
    (Identity.INKY, (30, 38)),
    (Identity.CLYDE, (30, 1)),
])
def test_scatter_corners(identity, corner):
    assert scatter_corner(identity, 32, 40) == corner
    assert target_for(identity, AdversaryMode.SCATTER, ctx()) == corner


def test_frightened_has_no_target():
    with pytest.raises(ValueError):
        target_for(Identity.BLINKY, AdversaryMode.FRIGHTENED, ctx())


def test_blinky_targets_player():
    assert chase(Identity.BLINKY, ctx(player=(7, 3))) == (7, 3)


@pytest.mark.parametrize("facing, expected", [
    (Direction.UP, (6, 6)),       # four up and four left
    (Direction.DOWN, (14, 10)),
    (Direction.LEFT, (10, 6)),
    (Direction.RIGHT, (10, 14)),
])
def test_pinky_four_ahead(facing, expected):
    assert chase(Identity.PINKY, ctx(facing=facing)) == expected


def test_ahead_rejects_unknown_facing():
    with pytest.raises(ValueError):
        ahead_of_player(ctx(facing="NORTH"), 2)


def test_inky_reflects_blinky_through_anchor():
    # anchor (10, 12); |blinky - anchor| = (6, 8)
    target = chase(Identity.INKY, ctx(facing=Direction.RIGHT, blinky=(4, 20)))
    assert target == (16, 20)


def test_inky_uses_magnitudes_not_signed_vector():
    # anchor (8, 8) from the facing-up quirk; signed doubling would give (4, 12)
    target = chase(Identity.INKY, ctx(facing=Direction.UP, blinky=(12, 4)))
    assert target == (12, 12)


def test_clyde_chase_is_scatter_corner():
    near = ctx(player=(29, 2), position=(30, 1))
    far = ctx(player=(2, 30), position=(30, 1))
    assert chase(Identity.CLYDE, near) == (30, 1)
    assert chase(Identity.CLYDE, far) == (30, 1)


def test_clyde_proximity_rule_when_enabled():
    far = ctx(player=(2, 30), position=(30, 1), clyde_proximity=True)
    near = ctx(player=(28, 3), position=(30, 1), clyde_proximity=True)
    assert chase(Identity.CLYDE, far) == (2, 30)
    assert chase(Identity.CLYDE, near) == (30, 1)


def test_targets_are_clamped_into_grid():
    assert chase(Identity.PINKY, ctx(player=(2, 2), facing=Direction.UP)) == (0, 0)
    assert chase(Identity.PINKY, ctx(player=(30, 38), facing=Direction.RIGHT)) == (30, 39)
    assert chase(Identity.INKY, ctx(player=(30, 30), facing=Direction.DOWN, blinky=(0, 0))) == (31, 39)
