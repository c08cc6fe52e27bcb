"""Cross-type properties of construction, normalization and join."""

import itertools

import pytest

from typedpath import (
    AbsolutePath,
    AbsolutePathBuf,
    JoinedAbsolute,
    NormalizationFailed,
    NotAbsolute,
    NotRelative,
    RelativePath,
    RelativePathBuf,
    WasNotNormalized,
)

ABSOLUTE_INPUTS = ["/", "/a", "/a/b", "/a//b/", "/a/./b", "/a/../b", "/a/b/../..", "/a/.."]
RELATIVE_INPUTS = ["a", "a/b", ".", "..", "../a", "a/../..", "./a/./b", "a/b/../../.."]
CANDIDATES = ["c", "../c", "./c", "..", "../..", "../../..", "c/../d", ".", "x/y/../../.."]


def _has_markers(text):
    return any(part in (".", "..") for part in text.split("/"))


class TestIdempotence:
    @pytest.mark.parametrize("raw", ABSOLUTE_INPUTS)
    def test_normalizing_twice_changes_nothing(self, raw):
        once = AbsolutePathBuf.try_new(raw)
        twice = AbsolutePathBuf.try_new(str(once))
        assert once == twice
        assert str(once) == str(twice)

    @pytest.mark.parametrize("raw", RELATIVE_INPUTS)
    def test_collapsing_twice_changes_nothing(self, raw):
        once = RelativePathBuf.try_new(raw)
        assert RelativePathBuf.try_new(str(once)) == once


class TestRoundTrip:
    @pytest.mark.parametrize("cls", [AbsolutePath, AbsolutePathBuf])
    @pytest.mark.parametrize("raw", ["/", "/a", "/a/b.txt", "/a//b/"])
    def test_absolute(self, cls, raw):
        value = cls.try_new(raw)
        assert cls.try_new(str(value)) == value

    @pytest.mark.parametrize("cls", [RelativePath, RelativePathBuf])
    @pytest.mark.parametrize("raw", RELATIVE_INPUTS)
    def test_relative(self, cls, raw):
        value = cls.try_new(raw)
        assert cls.try_new(str(value)) == value


class TestRootBoundary:
    @pytest.mark.parametrize(
        "base,candidate", list(itertools.product(["/", "/a", "/a/b"], CANDIDATES))
    )
    def test_join_fails_or_stays_normalized(self, base, candidate):
        try:
            result = AbsolutePath.try_new(base).join(candidate)
        except NormalizationFailed:
            return
        text = str(result)
        assert text.startswith("/")
        assert not _has_markers(text)
        assert AbsolutePath.try_new(text) == result.as_absolute_path()


class TestAssociativity:
    @pytest.mark.parametrize(
        "first,second",
        [("c", "d"), ("../c", "./d"), ("c/d", "../../e"), ("..", "x"), (".", "..")],
    )
    def test_join_then_join(self, first, second):
        base = AbsolutePath.try_new("/a/b")
        stepwise = base.join(first).join(second)
        at_once = base.join(first + "/" + second)
        assert stepwise == at_once

    def test_relative_join_then_join(self):
        base = RelativePath.try_new("a")
        assert base.join("../..").join("b") == base.join("../../b")


class TestRejectionSymmetry:
    @pytest.mark.parametrize("raw", ABSOLUTE_INPUTS + RELATIVE_INPUTS)
    def test_absolute_view(self, raw):
        expect_ok = raw.startswith("/") and not _has_markers(raw)
        if expect_ok:
            AbsolutePath.try_new(raw)
            return
        expected = WasNotNormalized if raw.startswith("/") else NotAbsolute
        with pytest.raises(expected):
            AbsolutePath.try_new(raw)

    @pytest.mark.parametrize("raw", ABSOLUTE_INPUTS + RELATIVE_INPUTS)
    def test_relative_view(self, raw):
        if raw.startswith("/"):
            with pytest.raises(NotRelative):
                RelativePath.try_new(raw)
        else:
            RelativePath.try_new(raw)


class TestScenarios:
    @pytest.fixture
    def base(self):
        return AbsolutePathBuf.try_new("/a/b")

    @pytest.mark.parametrize(
        "candidate,expected",
        [("c", "/a/b/c"), ("../c", "/a/c"), ("./c", "/a/b/c")],
    )
    def test_relative_joins(self, base, candidate, expected):
        assert str(base.join(candidate)) == expected

    def test_absolute_candidate(self, base):
        with pytest.raises(JoinedAbsolute):
            base.join("/x")

    def test_too_many_parents(self, base):
        with pytest.raises(NormalizationFailed):
            base.join("../../../")

    def test_construct_collapses(self):
        assert str(AbsolutePathBuf.try_new("/a/./b/../c")) == "/a/c"
