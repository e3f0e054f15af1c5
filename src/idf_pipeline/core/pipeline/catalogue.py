# src/idf_pipeline/core/pipeline/catalogue.py
"""
Catálogo fixo de datasets de precipitação.

Um dataset é um identificador opaco: o core não interpreta sua
estrutura, apenas valida pertencimento e preserva a ordem de
declaração (usada na listagem e na expansão de "all").

Invariantes:
    - Identificadores são únicos e não contêm "-" (reservado à sintaxe de intervalo)
    - O catálogo é uma constante de processo, sem API de mutação
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from idf_pipeline.core.exceptions import unknown_dataset


class DatasetCatalogue:
    """Conjunto ordenado e somente-leitura de identificadores de dataset."""

    def __init__(self, names: Iterable[str]):
        ordered = tuple(names)
        if len(set(ordered)) != len(ordered):
            raise ValueError("Duplicate dataset identifier in catalogue")
        for name in ordered:
            if not name or "-" in name or "," in name:
                raise ValueError(f"Invalid dataset identifier: {name!r}")
        self._names: Tuple[str, ...] = ordered

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, position: int) -> str:
        return self._names[position]

    def names(self) -> List[str]:
        return list(self._names)

    def is_valid(self, name: str) -> bool:
        return name in self._names

    def lookup(self, name: str) -> int:
        """Posição de `name` na ordem de declaração; levanta `UnknownDataset`."""
        if not self.is_valid(name):
            raise unknown_dataset(name, self.names())
        return self._names.index(name)


DATASET_CATALOGUE = DatasetCatalogue(
    [
        "cmorph",
        "era5",
        "gpcc",
        "imerg",
        "mswep",
        "persiann",
        "trmm",
    ]
)
