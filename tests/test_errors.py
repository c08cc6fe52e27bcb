"""Tests for typedpath error types."""

import pytest

from typedpath.errors import (
    AbsoluteJoinError,
    AbsolutePathBufNewError,
    AbsolutePathNewError,
    CombinedJoinError,
    JoinedAbsolute,
    NormalizationFailed,
    NotAbsolute,
    NotRelative,
    PathError,
    PathsAreIdentical,
    RelativeToError,
    WasNotNormalized,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_all_errors_inherit_from_path_error(self) -> None:
        for cls in (
            NotAbsolute,
            NotRelative,
            WasNotNormalized,
            NormalizationFailed,
            JoinedAbsolute,
            PathsAreIdentical,
        ):
            assert issubclass(cls, PathError)

    def test_path_error_is_value_error(self) -> None:
        assert issubclass(PathError, ValueError)

    @pytest.mark.parametrize(
        "group,members",
        [
            (AbsolutePathNewError, (NotAbsolute, WasNotNormalized)),
            (AbsolutePathBufNewError, (NotAbsolute, NormalizationFailed)),
            (AbsoluteJoinError, (JoinedAbsolute, NormalizationFailed)),
            (CombinedJoinError, (JoinedAbsolute, NormalizationFailed)),
            (RelativeToError, (PathsAreIdentical,)),
        ],
    )
    def test_operation_groups(self, group, members) -> None:
        for member in members:
            assert issubclass(member, group)

    def test_groups_do_not_overlap_wrongly(self) -> None:
        assert not issubclass(WasNotNormalized, AbsolutePathBufNewError)
        assert not issubclass(NormalizationFailed, AbsolutePathNewError)
        assert not issubclass(NotRelative, AbsoluteJoinError)


class TestErrorDisplay:
    """Each error renders one line naming the path and the rule."""

    @pytest.mark.parametrize(
        "error,message",
        [
            (NotAbsolute("foo.txt"), "`foo.txt` was not an absolute path"),
            (NotRelative("/foo.txt"), "`/foo.txt` was not a relative path"),
            (
                WasNotNormalized("/a/../b"),
                "`/a/../b` must be normalized, but contained '.' or '..'",
            ),
            (NormalizationFailed("/.."), "`/..` could not be normalized"),
            (
                JoinedAbsolute("/a/b", "/x"),
                "Attempted to join `/a/b` to non-relative path `/x`",
            ),
            (
                PathsAreIdentical("/a"),
                "Provided paths are identical (`/a`), and cannot be relativized",
            ),
        ],
    )
    def test_message(self, error, message) -> None:
        assert str(error) == message
        assert "\n" not in str(error)

    def test_attributes(self) -> None:
        error = JoinedAbsolute("/a/b", "/x")
        assert error.base == "/a/b"
        assert error.joined == "/x"
        assert NormalizationFailed("/..").path == "/.."


class TestErrorEquality:
    def test_equal_by_type_and_arguments(self) -> None:
        assert NotAbsolute("a") == NotAbsolute("a")
        assert NotAbsolute("a") != NotAbsolute("b")
        assert NotAbsolute("a") != NotRelative("a")
        assert hash(NotAbsolute("a")) == hash(NotAbsolute("a"))

    def test_can_be_raised_and_caught_by_group(self) -> None:
        with pytest.raises(AbsoluteJoinError):
            raise JoinedAbsolute("/a", "/b")
        with pytest.raises(ValueError, match="could not be normalized"):
            raise NormalizationFailed("/..")
