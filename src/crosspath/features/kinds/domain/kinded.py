"""
Summary: Kind-tagged path wrappers refining raw strings into absolute, relative or unqualified paths.
Why: Offer fail-fast kind and root checks on top of the segment Path algebra.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from crosspath.features.segments.domain.algorithms import (
    CURRENT,
    DRIVE_ROOT_PATTERN,
    PARENT,
    UNC_PREFIX_SEGMENTS,
    is_root_marker,
)
from crosspath.features.segments.domain.path import Path, PathInput
from crosspath.features.segments.domain.separators import DEFAULT_SEPARATOR, SEPARATORS, detect_separator
from crosspath.shared.errors import (
    DriveMismatchError,
    PathKindMismatchError,
    RootKindMismatchError,
    UNCHostMismatchError,
)

from .classification import (
    UNC_PREFIX,
    PathKind,
    RootKind,
    detect_path_kind,
    detect_root_kind,
    drive_letter,
    unc_host,
)

if TYPE_CHECKING:
    from crosspath.features.kinds.usecases.ports import DirectoryLister

logger = logging.getLogger(__name__)

_SEPARATOR_CHARS = "".join(SEPARATORS)


def render_raw(path: Path, *, empty: str) -> str:
    """Join ``path`` back into a raw string.

    A bare root renders as its separator, a bare UNC prefix as two of them;
    drive roots stay ``C:``. ``empty`` is returned for a path without segments.
    """
    if path.segments == UNC_PREFIX_SEGMENTS:
        return path.separator * len(UNC_PREFIX_SEGMENTS)
    joined = path.separator.join(path.segments)
    if joined:
        return joined
    if path.segments:
        return path.separator
    return empty


def _is_bare_root(text: str) -> bool:
    return text == "" or DRIVE_ROOT_PATTERN.match(text) is not None


def _default_lister() -> DirectoryLister:
    from crosspath.platform.filesystem.local import LocalDirectoryLister

    return LocalDirectoryLister()


class KindedPath:
    """A raw path string tagged with its ``PathKind``.

    The tag is checked against the string on construction. Subclasses pin
    the tag and keep their own type across type-preserving operations.
    """

    __slots__ = ("_raw", "_kind")

    KIND: ClassVar[PathKind | None] = None

    _raw: str
    _kind: PathKind

    def __init__(self, raw: str, kind: PathKind | str | None = None) -> None:
        required = type(self).KIND
        if kind is None:
            if required is None:
                raise TypeError("KindedPath requires an explicit kind")
            kind = required
        kind = PathKind(kind)
        if required is not None and kind is not required:
            raise PathKindMismatchError(required.value, kind.value, raw)

        actual = detect_path_kind(raw)
        if actual is not kind:
            logger.debug("Rejected %r: expected %s, detected %s", raw, kind.value, actual.value)
            raise PathKindMismatchError(kind.value, actual.value, raw)

        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_kind", kind)

    # Factories --------------------------------------------------------------

    @staticmethod
    def from_string(raw: str) -> "KindedPath":
        """Build the subclass matching the detected kind of ``raw``."""
        return _KIND_CLASSES[detect_path_kind(raw)](raw)

    @staticmethod
    def from_absolute_path_string(raw: str) -> "AbsolutePath":
        return AbsolutePath(raw)

    @staticmethod
    def from_relative_path_string(raw: str) -> "RelativePath":
        return RelativePath(raw)

    @staticmethod
    def from_unqualified_path_string(raw: str) -> "UnqualifiedPath":
        return UnqualifiedPath(raw)

    def _derive(self, raw: str) -> "KindedPath":
        # Same kind keeps the receiver's type; otherwise re-classify.
        if detect_path_kind(raw) is self._kind:
            return type(self)(raw, self._kind)
        return KindedPath.from_string(raw)

    # Value semantics --------------------------------------------------------

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def kind(self) -> PathKind:
        return self._kind

    @property
    def separator(self) -> str:
        return detect_separator(self._raw, DEFAULT_SEPARATOR)

    def to_path(self) -> Path:
        """Return the segment-model view of this path."""
        if not self._raw:
            return Path(separator=self.separator)
        return Path(self._raw)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._raw, self._kind))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KindedPath):
            return NotImplemented
        return type(self) is type(other) and self._raw == other._raw

    def __hash__(self) -> int:
        return hash((type(self), self._raw))

    def __str__(self) -> str:
        return self._raw

    def __fspath__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw!r})"

    # Predicates -------------------------------------------------------------

    def is_absolute(self) -> bool:
        return self._kind is PathKind.ABSOLUTE

    def is_relative(self) -> bool:
        return self._kind is PathKind.RELATIVE

    def is_unqualified(self) -> bool:
        return self._kind is PathKind.UNQUALIFIED

    def has_trailing_slash(self) -> bool:
        """Return whether the raw string ends in a separator (bare roots excluded)."""
        if not self._raw or self._raw[-1] not in SEPARATORS:
            return False
        return not _is_bare_root(self._raw.rstrip(_SEPARATOR_CHARS))

    # Operations -------------------------------------------------------------

    def remove_trailing_slash(self) -> Self:
        stripped = self._raw.rstrip(_SEPARATOR_CHARS)
        if stripped == self._raw:
            return self
        if stripped == "":
            stripped = self._raw[: len(UNC_PREFIX)] if self._raw.startswith(UNC_PREFIX) else self._raw[0]
        elif DRIVE_ROOT_PATTERN.match(stripped):
            stripped = self._raw[: len(stripped) + 1]
        return self._derive(stripped)  # pyright: ignore[reportReturnType]

    def append(self, *parts: PathInput) -> Self:
        """Append ``parts``; the result keeps this path's separator."""
        joined = self.to_path().concat(*parts)
        return self._derive(render_raw(joined, empty=CURRENT))  # pyright: ignore[reportReturnType]

    def resolve(self) -> "KindedPath":
        """Resolve ``.`` and ``..`` lexically.

        Absolute paths stay absolute. Other paths may change kind, for
        example ``foo/../..`` resolves to the relative path ``..``.
        """
        normalized = self.to_path().normalize()
        return self._derive(render_raw(normalized, empty=CURRENT))


def _coerce_absolute(value: "AbsolutePath | Path | str") -> "AbsolutePath":
    if isinstance(value, AbsolutePath):
        return value
    return KindedPath.from_absolute_path_string(str(value))


class AbsolutePath(KindedPath):
    """A path anchored at ``/``, a drive letter, or a UNC prefix."""

    __slots__ = ()

    KIND = PathKind.ABSOLUTE

    @override
    def resolve(self) -> Self:
        return super().resolve()  # pyright: ignore[reportReturnType]

    def root_kind(self) -> RootKind:
        return detect_root_kind(self._raw)

    def relative_to(self, other: "AbsolutePath | Path | str") -> "RelativePath":
        """Express this path relative to the absolute directory ``other``.

        Raises:
            PathKindMismatchError: If ``other`` is not absolute.
            RootKindMismatchError: If the root grammars differ.
            DriveMismatchError: If both use drive letters but not the same one.
            UNCHostMismatchError: If both are UNC paths on different hosts.
        """
        base = _coerce_absolute(other)
        own_root = self.root_kind()
        base_root = base.root_kind()

        if own_root is not base_root:
            logger.debug("Root kinds differ: %s vs %s", own_root.value, base_root.value)
            raise RootKindMismatchError(self._raw, base.raw, own_root.value, base_root.value)
        if own_root is RootKind.LETTER_DRIVE and drive_letter(self._raw) != drive_letter(base.raw):
            raise DriveMismatchError(self._raw, base.raw)
        if own_root is RootKind.UNC and unc_host(self._raw) != unc_host(base.raw):
            raise UNCHostMismatchError(self._raw, base.raw)

        relative = self.to_path().relative_to(base.to_path())
        return RelativePath(render_raw(relative, empty=CURRENT))

    def parent_directory(self) -> Self:
        """Return the containing directory.

        Bare roots (``/``, ``C:\\``, ``\\\\host``) are their own parent.
        """
        path = self.to_path()
        segments = path.segments
        if all(is_root_marker(segments, index) for index in range(len(segments))):
            return self
        return self._derive(render_raw(path.dirname(), empty=CURRENT))  # pyright: ignore[reportReturnType]

    def readdir_sync(self, lister: DirectoryLister | None = None) -> list[Self]:
        """List the directory through ``lister`` and wrap each child name.

        Errors raised by the lister are passed through unchanged.
        """
        source = lister if lister is not None else _default_lister()
        return [self.append(name) for name in source.list_names(self._raw)]

    async def readdir(self, lister: DirectoryLister | None = None) -> list[Self]:
        """Asynchronous ``readdir_sync``; the listing runs in a worker thread."""
        source = lister if lister is not None else _default_lister()
        names = await asyncio.to_thread(source.list_names, self._raw)
        return [self.append(name) for name in names]


class _Rootless(KindedPath):
    __slots__ = ()

    def to_absolute(self, context_dir: "AbsolutePath | Path | str") -> AbsolutePath:
        """Join onto the absolute ``context_dir`` and resolve ``.``/``..``."""
        base = _coerce_absolute(context_dir)
        joined = base.to_path().concat(self.to_path()).normalize()
        return base._derive(render_raw(joined, empty=CURRENT))  # pyright: ignore[reportReturnType]


class RelativePath(_Rootless):
    """A path starting with ``.`` or ``..``."""

    __slots__ = ()

    KIND = PathKind.RELATIVE

    def to_unqualified(self) -> "UnqualifiedPath":
        """Strip the leading run of ``.``/``..`` segments only.

        ``../.././../foo/../bar`` becomes ``foo/../bar``.
        """
        path = self.to_path()
        segments = list(path.segments)
        while segments and segments[0] in (CURRENT, PARENT):
            del segments[0]
        return UnqualifiedPath(path.separator.join(segments))


class UnqualifiedPath(_Rootless):
    """A path with neither a root nor a leading ``.``/``..``."""

    __slots__ = ()

    KIND = PathKind.UNQUALIFIED

    def prepend(self, *parts: PathInput) -> Self:
        """Put ``parts`` in front of this path, keeping this path's separator."""
        own = self.to_path()
        prefix = Path(*parts)
        joined = Path.from_segments([*prefix.segments, *own.segments], own.separator)
        return self._derive(render_raw(joined, empty=""))  # pyright: ignore[reportReturnType]


_KIND_CLASSES: dict[PathKind, type[KindedPath]] = {
    PathKind.ABSOLUTE: AbsolutePath,
    PathKind.RELATIVE: RelativePath,
    PathKind.UNQUALIFIED: UnqualifiedPath,
}


__all__ = [
    "AbsolutePath",
    "KindedPath",
    "RelativePath",
    "UnqualifiedPath",
    "render_raw",
]
