"""Classification of failures into defects and capturable errors.

A defect is a failure that almost always means the calling code is wrong
(a typo'd name, an attribute looked up on ``None``, a bad argument count)
rather than an expected runtime condition. Defects must surface loudly, so
the adapter re-raises them instead of folding them into an outcome.

The decision is made purely on the failure's type. There are no call-site
or contextual exemptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gowait.errors import ConfigurationError

__all__ = [
    "DEFAULT_CATEGORIES",
    "DefectCategory",
    "DefectPolicy",
    "default_policy",
    "is_defect",
]


@dataclass(frozen=True, slots=True)
class DefectCategory:
    """A named group of built-in exception types that signal a defect."""

    name: str
    kinds: tuple[type[BaseException], ...]

    def __post_init__(self) -> None:
        """Reject empty categories and entries that are not exception classes."""
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(
                f"DefectCategory.name must be a non-empty string, got {self.name!r}"
            )
        if not isinstance(self.kinds, (tuple, list)):
            raise ConfigurationError(
                f"DefectCategory {self.name!r} kinds must be a tuple, got {type(self.kinds).__name__}",
                hint="Pass a tuple of exception classes.",
            )
        object.__setattr__(self, "kinds", tuple(self.kinds))
        if not self.kinds:
            raise ConfigurationError(
                f"DefectCategory {self.name!r} has no exception types",
                hint="Drop the category instead of leaving it empty.",
            )
        for kind in self.kinds:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                raise ConfigurationError(
                    f"DefectCategory {self.name!r} entry {kind!r} is not an exception class"
                )

    def matches(self, exc: BaseException) -> bool:
        return isinstance(exc, self.kinds)


# Order matters: the first matching category names the verdict.
DEFAULT_CATEGORIES: tuple[DefectCategory, ...] = (
    DefectCategory("range", (IndexError, OverflowError, RecursionError)),
    DefectCategory("reference", (NameError, ReferenceError)),
    # eval/exec/compile failures surface as SyntaxError too.
    DefectCategory("syntax", (SyntaxError,)),
    DefectCategory("type", (TypeError, AttributeError)),
    DefectCategory("uri", (UnicodeError,)),
)


@dataclass(frozen=True)
class DefectPolicy:
    """Ordered table of defect categories used by the adapter.

    The default instance holds the built-in table. Custom policies are
    meant for libraries that define their own programming-error types and
    want them treated the same way.

    Example:
        policy = DefectPolicy(
            categories=(*DEFAULT_CATEGORIES, DefectCategory("lookup", (KeyError,)))
        )
        err, value = await gowait_with(policy, fetch_user, user_id)
    """

    categories: tuple[DefectCategory, ...] = field(
        default_factory=lambda: DEFAULT_CATEGORIES
    )

    def __post_init__(self) -> None:
        """Validate entries and store them as a tuple."""
        if not isinstance(self.categories, (tuple, list)):
            raise ConfigurationError(
                f"DefectPolicy.categories must be a tuple, got {type(self.categories).__name__}",
                hint="Pass a tuple of DefectCategory objects.",
            )
        categories = tuple(self.categories)
        for category in categories:
            if not isinstance(category, DefectCategory):
                raise ConfigurationError(
                    f"Expected DefectCategory, got {type(category).__name__}",
                    hint="Wrap exception types in DefectCategory(name, kinds).",
                )
        names = [c.name for c in categories]
        if len(set(names)) != len(names):
            raise ConfigurationError(
                f"Duplicate defect category names: {names!r}",
            )
        object.__setattr__(self, "categories", categories)

    @property
    def kinds(self) -> tuple[type[BaseException], ...]:
        """All exception types in table order."""
        return tuple(kind for c in self.categories for kind in c.kinds)

    def match(self, exc: BaseException) -> DefectCategory | None:
        """Return the first category *exc* belongs to, or None when capturable."""
        for category in self.categories:
            if category.matches(exc):
                return category
        return None


_DEFAULT_POLICY = DefectPolicy()


def is_defect(exc: BaseException, policy: DefectPolicy | None = None) -> bool:
    """Return True when *exc* is a defect that must not be captured.

    Contract:
    - Membership is ``isinstance`` against each category in order.
    - Never raises; every input gets a verdict.
    """
    return (policy if policy is not None else _DEFAULT_POLICY).match(exc) is not None


def default_policy() -> DefectPolicy:
    return _DEFAULT_POLICY
