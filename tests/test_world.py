from bullethell.world import GameWorld, get_world


def test_new_world_has_no_player():
    assert GameWorld().player is None


def test_player_can_be_registered():
    world = GameWorld()
    hero = object()
    world.player = hero
    assert world.player is hero


def test_get_world_is_shared():
    world = get_world()
    previous = world.player
    marker = object()
    world.player = marker
    try:
        assert get_world().player is marker
    finally:
        world.player = previous