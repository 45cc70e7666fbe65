"""
Enum module emitter: turn a bucket of keys into a Python enum module.

The emitter knows nothing about input formats.  Extractors that need
more than plain members pass an ``EnumDecorator``, which receives the
``EnumClassBuilder`` before it is rendered and may add imports, base
classes, module-level statements and class-body code.

Output for a bucket ``Menu`` with keys ``bye`` and ``hello.world``:

    class Menu(Enum):
        BYE = 'bye'
        HELLO_WORLD = 'hello.world'
"""

from __future__ import annotations

import keyword
import logging
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from enumgen.core.errors import EmissionError, EntryNameConversionFailure
from enumgen.core.models.source import GeneratedArtifact, Identifier
from enumgen.core.models.template import GeneratedFile
from enumgen.core.services.naming import to_member_name

logger = logging.getLogger(__name__)

_HEADER = (
    "# Generated by enumgen. Do not edit: changes are overwritten on the next run.\n"
    "# Package: {package}"
)
_INDENT = "    "


# ── Builder + decoration hook ───────────────────────────────────


@dataclass
class EnumClassBuilder:
    """Mutable description of one generated module, rendered by ``build()``."""

    package: str
    type_name: str
    members: list[Identifier] = field(default_factory=list)
    bases: list[str] = field(default_factory=lambda: ["Enum"])
    imports: list[str] = field(default_factory=lambda: ["from enum import Enum"])
    module_statements: list[str] = field(default_factory=list)
    body_blocks: list[str] = field(default_factory=list)

    def add_import(self, line: str) -> EnumClassBuilder:
        if line not in self.imports:
            self.imports.append(line)
        return self

    def add_base(self, base: str) -> EnumClassBuilder:
        if base not in self.bases:
            self.bases.append(base)
        return self

    def add_module_statement(self, code: str) -> EnumClassBuilder:
        """Add code placed at module level, before the class."""
        self.module_statements.append(textwrap.dedent(code).strip("\n"))
        return self

    def add_block(self, code: str) -> EnumClassBuilder:
        """Add code placed in the class body, after the members."""
        self.body_blocks.append(textwrap.dedent(code).strip("\n"))
        return self

    def build(self) -> str:
        lines = [
            _HEADER.format(package=self.package),
            "",
            "from __future__ import annotations",
            "",
            *sorted(self.imports),
        ]
        for stmt in self.module_statements:
            lines += ["", stmt]

        body: list[str] = []
        if self.members:
            body.append("\n".join(
                f"{m.member_name} = {m.original!r}" for m in self.members
            ))
        body.extend(self.body_blocks)
        if not body:
            body.append("pass")

        lines += ["", "", f"class {self.type_name}({', '.join(self.bases)}):"]
        lines.append("\n\n".join(textwrap.indent(block, _INDENT) for block in body))
        return "\n".join(lines) + "\n"


class EnumDecorator(Protocol):
    """Hook for adding format-specific members to a generated enum."""

    def decorate(self, builder: EnumClassBuilder) -> None:
        ...


# ── Sanitizing a bucket ─────────────────────────────────────────


def is_reserved_member(member: str, type_name: str) -> bool:
    """True if ``Enum`` would not accept *member* as a plain member.

    ``_sunder_`` names raise on class creation; ``__dunder__`` and
    ``__private`` names (including the mangled ``_TypeName__x`` form)
    become class attributes instead of members.
    """
    if member.startswith("__"):
        return True
    if member.startswith(f"_{type_name.lstrip('_')}__"):
        return True
    return (
        len(member) > 2
        and member[0] == member[-1] == "_"
        and member[1] != "_"
        and member[-2] != "_"
    )


def build_artifact(
    package: str,
    type_name: str,
    keys: Iterable[str],
    decorator: EnumDecorator | None = None,
) -> tuple[GeneratedArtifact, list[str]]:
    """Sanitize raw keys into the identifiers of one artifact.

    Keys are processed in lexical order.  Keys that cannot be converted,
    or that convert to a name ``Enum`` reserves, are dropped; when two keys map to the same member name the later key
    replaces the earlier one.  Both cases produce a warning.

    Returns:
        The artifact and the list of warning messages.
    """
    by_member: dict[str, str] = {}
    warnings: list[str] = []

    for key in sorted(keys):
        member = to_member_name(key)
        if member is None or is_reserved_member(member, type_name):
            msg = str(EntryNameConversionFailure(key, type_name))
            logger.warning(msg)
            warnings.append(msg)
            continue
        if member in by_member:
            msg = (
                f"Entries `{by_member[member]}` and `{key}` in {type_name} both map to "
                f"{member}; keeping `{key}`."
            )
            logger.warning(msg)
            warnings.append(msg)
        by_member[member] = key

    identifiers = [
        Identifier(member_name=member, original=by_member[member])
        for member in sorted(by_member)
    ]
    artifact = GeneratedArtifact(
        package=package,
        type_name=type_name,
        identifiers=identifiers,
        decorator=decorator,
    )
    return artifact, warnings


# ── Emission ────────────────────────────────────────────────────


def _check(artifact: GeneratedArtifact) -> None:
    name = artifact.type_name
    if not name or not name.isidentifier() or keyword.iskeyword(name):
        raise EmissionError(f"Invalid enum class name: {name!r}")
    if not artifact.package:
        raise EmissionError(f"No package set for enum {artifact.type_name}")

    names = artifact.member_names
    if len(names) != len(set(names)):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise EmissionError(
            f"Duplicate members in {artifact.type_name}: {', '.join(dupes)}"
        )
    invalid = [
        n for n in names
        if not n.isidentifier() or keyword.iskeyword(n) or is_reserved_member(n, name)
    ]
    if invalid:
        raise EmissionError(
            f"Invalid member names in {artifact.type_name}: {', '.join(invalid)}"
        )


def emit(artifact: GeneratedArtifact) -> str:
    """Render the complete source text of one enum module.

    Raises:
        EmissionError: If the artifact violates an invariant that
            sanitization should have guaranteed.
    """
    _check(artifact)
    builder = EnumClassBuilder(
        package=artifact.package,
        type_name=artifact.type_name,
        members=sorted(artifact.identifiers, key=lambda i: i.member_name),
    )
    if artifact.decorator is not None:
        artifact.decorator.decorate(builder)
    return builder.build()


def module_path(package: str, type_name: str) -> str:
    """Relative path of the generated module, e.g. ``com/example/Menu.py``."""
    return "/".join([*package.split("."), f"{type_name}.py"])


def generate_enum_module(artifact: GeneratedArtifact, reason: str = "") -> GeneratedFile:
    """Emit *artifact* as a GeneratedFile relative to the generated-source root."""
    return GeneratedFile(
        path=module_path(artifact.package, artifact.type_name),
        content=emit(artifact),
        overwrite=True,
        reason=reason or f"Generated enum {artifact.type_name} "
        f"with {len(artifact.identifiers)} member(s)",
    )
