"""Compiler context - shared state passed through compilation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vjade.errors import DuplicateMixinError, UnknownMixinError

if TYPE_CHECKING:
    from vjade.emitter import JSEmitter
    from vjade.options import CompilerOptions

# JavaScript object holding the compiled mixin functions
MIXINS_VAR = "jade_mixins"


@dataclass(frozen=True)
class MixinSignature:
    """Declared shape of a mixin: name, positional params and rest param."""

    name: str
    params: tuple[str, ...] = ()
    rest: str | None = None

    @property
    def has_rest(self) -> bool:
        return self.rest is not None


@dataclass
class MixinRegistry:
    """Mixins declared anywhere in one compile unit.

    Filled by the pre-pass so calls resolve regardless of declaration order.
    Insertion order is kept, so hoisted definitions follow document order.
    """

    signatures: dict[str, MixinSignature] = field(default_factory=dict)

    def declare(self, signature: MixinSignature) -> None:
        """Register a mixin.

        Raises DuplicateMixinError if the name is already taken.
        """
        if signature.name in self.signatures:
            msg = f"Mixin '{signature.name}' is declared more than once"
            raise DuplicateMixinError(msg)
        self.signatures[signature.name] = signature

    def lookup(self, name: str) -> MixinSignature:
        """Return the signature for ``name``.

        Raises UnknownMixinError if not declared.
        """
        try:
            return self.signatures[name]
        except KeyError:
            msg = f"Mixin '{name}' is not declared"
            raise UnknownMixinError(msg) from None

    def contains(self, name: str) -> bool:
        return name in self.signatures

    def __len__(self) -> int:
        return len(self.signatures)


@dataclass
class CompilerContext:
    """Shared state passed through all compilation functions.

    Lives for exactly one ``compile_to_js`` call.
    """

    emitter: JSEmitter
    options: CompilerOptions

    mixins: MixinRegistry = field(default_factory=MixinRegistry)

    # Stack of child-array names; the last one receives pushed children
    parents: list[str] = field(default_factory=list)

    # Nesting depth of mixin bodies; a Block placeholder needs one
    mixin_depth: int = 0

    @property
    def parent(self) -> str:
        """Name of the child array currently being filled."""
        return self.parents[-1]

    def push_parent(self, name: str) -> None:
        self.parents.append(name)

    def pop_parent(self) -> None:
        self.parents.pop()


__all__ = ["MIXINS_VAR", "CompilerContext", "MixinRegistry", "MixinSignature"]
