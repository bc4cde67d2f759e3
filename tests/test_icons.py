import pytest

from flukit.icon_table_a import ICONS_A
from flukit.icon_table_b import ICONS_B
from flukit.icons import FluentIcons, icon_from_name, icon_glyph


def test_member_count_matches_tables():
    names = list(ICONS_A) + list(ICONS_B)
    resolved = {icon_from_name(name) for name in names}
    assert len(resolved) == len(ICONS_A) + len(ICONS_B)
    assert len(resolved) == len(FluentIcons.__members__)


def test_tables_share_no_names():
    assert set(ICONS_A).isdisjoint(ICONS_B)
    for name, value in ICONS_A.items():
        assert icon_from_name(name).value == value
    for name, value in ICONS_B.items():
        assert icon_from_name(name).value == value


def test_values_taken_from_tables():
    for name, value in {**ICONS_A, **ICONS_B}.items():
        assert icon_from_name(name) is FluentIcons[name]
        assert icon_glyph(name) == chr(value)


def test_pinned_values():
    assert icon_from_name("GlobalNavButton") == 0xE700
    assert icon_from_name("ClickedOutLoudSolidBold") == 0xF8B3
    assert icon_from_name("StatusWarningLeft") == 0xEC00
    assert icon_glyph("ClickedOutLoudSolidBold") == "\uf8b3"


def test_glyph_of_member():
    assert icon_glyph(FluentIcons.GlobalNavButton) == "\ue700"


def test_glyph_by_name_and_by_code_point_agree():
    assert icon_glyph("Add") == icon_glyph(FluentIcons.Add)
    assert icon_glyph(int(FluentIcons.Add)) == icon_glyph("Add")


def test_glyph_round_trip_for_every_icon():
    for icon in FluentIcons:
        glyph = icon_glyph(icon)
        assert len(glyph) == 1
        assert FluentIcons(ord(glyph)) is icon


def test_from_name_round_trip():
    for icon in FluentIcons:
        assert icon_from_name(icon.name) is icon


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        icon_from_name("NoSuchIcon")
    with pytest.raises(KeyError):
        icon_glyph("NoSuchIcon")


def test_unused_code_point_raises():
    with pytest.raises(ValueError):
        icon_glyph(0x41)
    with pytest.raises(ValueError):
        icon_glyph(0xE72F)


def test_icons_compare_as_ints():
    assert icon_from_name("Settings") + 0 == ICONS_A["Settings"]
    assert icon_from_name("eSIM") == ICONS_B["eSIM"]