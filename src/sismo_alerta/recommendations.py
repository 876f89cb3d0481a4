"""Safety recommendations by intensity band and construction type."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from sismo_alerta.intensity import clamp_intensity
from sismo_alerta.models import ConstructionType

# Intensity at and above which construction-specific advice is appended.
CONSTRUCTION_ADVICE_MIN_INTENSITY = 5

# (upper intensity bound inclusive, advice added at this band).
# Each band repeats everything from the bands below it, then adds its own.
_BAND_ADVICE: tuple[tuple[int, tuple[str, ...]], ...] = (
    (3, (
        "Mantén la calma y espera a que termine el movimiento",
    )),
    (5, (
        "Aléjate de ventanas y objetos que puedan caer",
        "Ubícate bajo una mesa resistente o junto a un muro estructural",
    )),
    (7, (
        "Protege tu cabeza y cuello con tus brazos",
        "Aléjate de espejos y muebles altos",
        "No uses ascensores",
        "Corta suministros de gas y electricidad si es posible",
    )),
    (12, (
        "Prepárate para evacuar después del sismo",
        "Ten cuidado con réplicas",
        "Sigue las instrucciones de las autoridades",
    )),
)

CONSTRUCTION_ADVICE: Mapping[ConstructionType, tuple[str, ...]] = MappingProxyType({
    ConstructionType.CONCRETE: (
        "Las estructuras de hormigón armado suelen ser resistentes a sismos moderados",
        "Aléjate de elementos no estructurales como cielos falsos o luminarias",
    ),
    ConstructionType.MASONRY: (
        "Aléjate de muros y tabiques que puedan agrietarse",
        "Busca protección bajo marcos de puertas reforzados",
    ),
    ConstructionType.WOOD: (
        "Las estructuras de madera suelen ser flexibles ante sismos",
        "Aléjate de chimeneas o elementos pesados que puedan desprenderse",
    ),
    ConstructionType.ADOBE: (
        "Las construcciones de adobe son muy vulnerables a sismos",
        "Evacúa al exterior si es posible hacerlo de forma segura",
        "Si no puedes evacuar, ubícate en una esquina junto a muros cortos",
    ),
})

if set(CONSTRUCTION_ADVICE) != set(ConstructionType):
    raise RuntimeError("Construction advice table does not cover every construction type")


def general_advice(intensity: float) -> list[str]:
    """Advice that applies regardless of construction, for *intensity*."""
    level = clamp_intensity(intensity)
    advice: list[str] = []
    for upper, additions in _BAND_ADVICE:
        advice.extend(additions)
        if level <= upper:
            break
    return advice


def recommendations_for(
    intensity: float,
    construction_type: ConstructionType = ConstructionType.CONCRETE,
) -> list[str]:
    """Ordered safety instructions for *intensity* in a *construction_type* building.

    General actions come first; from intensity V upward the
    construction-specific actions are appended at the end.
    """
    advice = general_advice(intensity)
    if clamp_intensity(intensity) >= CONSTRUCTION_ADVICE_MIN_INTENSITY:
        advice.extend(CONSTRUCTION_ADVICE[ConstructionType(construction_type)])
    return advice
