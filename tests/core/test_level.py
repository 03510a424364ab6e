import pytest

from treelog.core import DEFAULT_LEVEL, Level


def test_level_comparison_is_a_valid_comparator() -> None:
    level1 = Level("NOT_REAL1", 253)
    assert level1 == level1
    assert level1 <= level1
    assert level1 >= level1
    assert not level1 < level1
    assert not level1 > level1

    level2 = Level("NOT_REAL2", 455)
    assert level1 <= level2
    assert level1 < level2
    assert level2 >= level1
    assert level2 > level1

    level3 = Level("NOT_REAL3", 253)
    assert level1 is not level3
    assert level1 == level3


def test_canonical_levels_are_in_order() -> None:
    levels = Level.LEVELS
    for i, lower in enumerate(levels):
        for higher in levels[i + 1:]:
            assert lower < higher
    assert [level.value for level in levels] == [
        0, 300, 400, 500, 700, 800, 900, 1000, 1200, 2000,
    ]


def test_levels_sort_by_value() -> None:
    unsorted = [
        Level.INFO,
        Level.CONFIG,
        Level.FINE,
        Level.SHOUT,
        Level.OFF,
        Level.FINER,
        Level.ALL,
        Level.WARNING,
        Level.FINEST,
        Level.SEVERE,
    ]
    assert unsorted != list(Level.LEVELS)
    assert sorted(unsorted) == list(Level.LEVELS)


def test_levels_are_hashable() -> None:
    names = {Level.INFO: "info", Level.SHOUT: "shout"}
    assert names[Level.INFO] == "info"
    assert names[Level("LOUD", 1200)] == "shout"


def test_custom_level_equals_canonical_level_with_same_value() -> None:
    custom = Level("NOTICE", 800)
    assert custom == Level.INFO
    assert hash(custom) == hash(Level.INFO)
    assert str(custom) == "NOTICE"


def test_level_is_immutable() -> None:
    with pytest.raises(AttributeError):
        Level.INFO.value = 1  # type: ignore[misc]


def test_level_does_not_compare_with_other_types() -> None:
    assert Level.INFO != 800
    with pytest.raises(TypeError):
        _ = Level.INFO < 900  # type: ignore[operator]


def test_parse_level() -> None:
    assert Level.parse("warning") is Level.WARNING
    assert Level.parse(" FINE ") is Level.FINE
    assert Level.parse("1000") is Level.SEVERE
    custom = Level.parse("850")
    assert custom.value == 850
    assert Level.INFO < custom < Level.WARNING
    with pytest.raises(ValueError):
        Level.parse("verbose")


def test_default_level_is_info() -> None:
    assert DEFAULT_LEVEL is Level.INFO
