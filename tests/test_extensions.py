from enum import Enum

import pytest

from resumable.extensions import Extensions, enum_from_str


class SampleEnum(Enum):
    TEST_VAL_1 = "test-val-1"
    TEST_VAL_2 = "test-val-2"

    def __str__(self) -> str:
        return self.value


def test_from_str_unknown_val():
    with pytest.raises(ValueError):
        enum_from_str(SampleEnum, "unknown", "test-vals")


def test_from_str():
    assert enum_from_str(SampleEnum, "test-val-1", "test-vals") is SampleEnum.TEST_VAL_1


def test_unknown_message_lists_members():
    with pytest.raises(ValueError) as info:
        enum_from_str(SampleEnum, "unknown", "test-vals")
    assert str(info.value) == (
        "Unknown test-vals 'unknown'.\n Available test-valss:\n"
        "\t* test-val-1\n\t* test-val-2"
    )


@pytest.mark.parametrize(
    "name, member",
    [
        ("creation-defer-length", Extensions.CREATION_DEFER_LENGTH),
        ("creation-with-upload", Extensions.CREATION_WITH_UPLOAD),
        ("creation", Extensions.CREATION),
        ("termination", Extensions.TERMINATION),
        ("concatenation", Extensions.CONCATENATION),
        ("getting", Extensions.GETTING),
        ("checksum", Extensions.CHECKSUM),
    ],
)
def test_extension_round_trip(name, member):
    assert Extensions.from_str(name) is member
    assert str(member) == name


def test_extension_unknown():
    with pytest.raises(ValueError, match="Unknown extension 'nope'"):
        Extensions.from_str("nope")


def test_extension_ordering_follows_declaration():
    shuffled = [
        Extensions.from_str(name)
        for name in ("checksum", "creation", "creation-defer-length")
    ]
    assert [str(ext) for ext in sorted(shuffled)] == [
        "creation-defer-length",
        "creation",
        "checksum",
    ]