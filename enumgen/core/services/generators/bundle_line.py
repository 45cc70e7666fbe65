"""
Bundle-line decoration: make generated enums usable as translation keys.

Each member's value is the key in a resource bundle.  The decorated enum
gets a shared bundle slot that must be assigned through ``set_bundle()``
before ``nls()`` (or calling the member) can resolve a translated text:

    Menu.set_bundle(load_bundle("menu"))
    Menu.HELLO_WORLD("Ann")     # bundle["hello.world"].format("Ann")
"""

from __future__ import annotations

from dataclasses import dataclass

from enumgen.core.services.generators.enum_module import EnumClassBuilder

_BUNDLE_SLOT = "_i18n_bundle: Mapping[str, str] | None = None"

_SET_BUNDLE = '''
@classmethod
def set_bundle(cls, bundle: Mapping[str, str] | None) -> None:
    """Set the bundle used by nls() for every member of this enum.

    Must be called before translated texts are requested.
    """
    global _i18n_bundle
    _i18n_bundle = bundle
'''

_BUNDLE_PROPERTY = '''
@property
def bundle(self) -> Mapping[str, str]:
    if _i18n_bundle is None:
        raise LookupError(
            "{type_name}.set_bundle() must be called before translated texts can be read."
        )
    return _i18n_bundle
'''

_NLS = '''
def nls(self, *args: Any, **kwargs: Any) -> str:
    """Translated text for this key, formatted when arguments are given."""
    text = self.bundle[self.value]
    return text.format(*args, **kwargs) if args or kwargs else text

def __call__(self, *args: Any, **kwargs: Any) -> str:
    return self.nls(*args, **kwargs)

def __str__(self) -> str:
    return self.value
'''


@dataclass(frozen=True)
class BundleLineDecorator:
    """Adds the bundle slot, ``nls()``, ``__call__`` and ``__str__``."""

    def decorate(self, builder: EnumClassBuilder) -> None:
        builder.add_import("from collections.abc import Mapping")
        builder.add_import("from typing import Any")
        builder.add_module_statement(_BUNDLE_SLOT)
        builder.add_block(_SET_BUNDLE)
        builder.add_block(_BUNDLE_PROPERTY.replace("{type_name}", builder.type_name))
        builder.add_block(_NLS)
