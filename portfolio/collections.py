"""Fixed table of the portfolio collections and how each one is stored."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CollectionKind(str, Enum):
    SINGLETON = "singleton"
    LIST = "list"

    def empty(self):
        return [] if self is CollectionKind.LIST else {}


@dataclass(frozen=True)
class Collection:
    key: str
    kind: CollectionKind
    # URL prefix the router mounts the collection under
    route: str

    @property
    def filename(self) -> str:
        return f"{self.key}.json"

    @property
    def is_list(self) -> bool:
        return self.kind is CollectionKind.LIST


DADOS_BASICOS = "dadosBasicos"
CURSOS = "cursos"
PROJETOS = "projetos"
COMPETENCIAS = "competencias"
REDES_SOCIAIS = "redesSociais"

COLLECTIONS: dict[str, Collection] = {
    c.key: c
    for c in (
        Collection(DADOS_BASICOS, CollectionKind.SINGLETON, "basicos"),
        Collection(CURSOS, CollectionKind.LIST, "cursos"),
        Collection(PROJETOS, CollectionKind.LIST, "projetos"),
        Collection(COMPETENCIAS, CollectionKind.LIST, "competencias"),
        Collection(REDES_SOCIAIS, CollectionKind.SINGLETON, "redes"),
    )
}


def list_collections() -> list[Collection]:
    return [c for c in COLLECTIONS.values() if c.is_list]


def singleton_collections() -> list[Collection]:
    return [c for c in COLLECTIONS.values() if not c.is_list]
