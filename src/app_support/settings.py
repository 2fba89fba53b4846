# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************


from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from .bundle import bundle_identifier


@dataclass(frozen=True)
class Binding:
    name: str
    default: Any


class Settings:
    """Typed view over a key/value store, declared up front.

    Subclasses list their settings in ``bindings``. Every binding is stored
    under "<domain>.<ClassName>.<name>", so several settings classes can
    share one store. Defaults are never written to the store; they apply
    while a key is absent.

        class PlayerSettings(Settings):
            bindings = (
                Binding("volume", 0.8),
                Binding("muted", False),
            )

        settings = PlayerSettings(store, domain="com.example.player")
        settings.set("volume", 0.5)
    """

    bindings: ClassVar[tuple[Binding, ...]] = ()

    def __init__(self, store: MutableMapping[str, Any], domain: str):
        self.store = store
        self.domain = domain
        self._bindings: dict[str, Binding] = {}
        for binding in self.bindings:
            if binding.name in self._bindings:
                raise ValueError(
                    f"{type(self).__name__} declares {binding.name} more than once"
                )
            self._bindings[binding.name] = binding

    @classmethod
    def for_bundle(cls, store: MutableMapping[str, Any], info_plist: Path):
        """Settings whose domain is the CFBundleIdentifier of an app bundle."""
        identifier = bundle_identifier(info_plist)
        if identifier is None:
            raise ValueError(f"{info_plist} has no usable bundle identifier")
        return cls(store, domain=identifier)

    def _binding(self, name: str) -> Binding:
        try:
            return self._bindings[name]
        except KeyError:
            raise KeyError(f"{type(self).__name__} has no setting {name}") from None

    def key_for(self, name: str) -> str:
        self._binding(name)
        return f"{self.domain}.{type(self).__name__}.{name}"

    def get(self, name: str) -> Any:
        binding = self._binding(name)
        return self.store.get(self.key_for(name), binding.default)

    def set(self, name: str, value: Any) -> None:
        self.store[self.key_for(name)] = value

    def reset(self, name: str) -> None:
        self.store.pop(self.key_for(name), None)

    def as_dict(self) -> dict[str, Any]:
        return {name: self.get(name) for name in self._bindings}
