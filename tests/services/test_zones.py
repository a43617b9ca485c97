from app.services.zones import GROW_ZONES, get_zone, is_known_zone


def test_catalogue_covers_zones_3_to_11():
    assert [z.code for z in GROW_ZONES] == [str(n) for n in range(3, 12)]


def test_zone_label():
    assert get_zone("6").label == "Zone 6 (-10°F to 0°F)"


def test_lookup():
    assert get_zone(" 7 ").code == "7"
    assert get_zone("12") is None
    assert get_zone(None) is None
    assert is_known_zone("11")
    assert not is_known_zone("6b")
