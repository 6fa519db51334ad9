import math
from dataclasses import dataclass
from types import MappingProxyType

# Reference Curie temperature for materials without a ferroelectric transition
NON_FERROELECTRIC = -1.0


@dataclass(frozen=True)
class Material:
    name: str
    area_mm2: float
    thickness_mm: float
    curie_temp_c: float = NON_FERROELECTRIC

    @property
    def is_ferroelectric(self):
        return self.curie_temp_c > 0

    @property
    def side_mm(self):
        # samples are cut with square faces
        return math.sqrt(self.area_mm2)


def _build_table(*materials):
    return MappingProxyType({m.name: m for m in sorted(materials, key=lambda m: m.name)})


MATERIALS = _build_table(
    Material("Barium Titanate", 8 * 6, 1.42, 120),
    Material("Titanium Dioxide", 8 * 6, 1.42, 50),
    Material("Quartz", 8 * 6, 1.42),
)


def get_material(name):
    try:
        return MATERIALS[name]
    except KeyError:
        known = ", ".join(MATERIALS)
        raise KeyError(f"Unknown material: {name!r} (known: {known})") from None
