from dataclasses import dataclass
from enum import Enum


class DamageType(str, Enum):
    """Rapid visual screening grades, from no damage (O) to critical (D)."""

    TYPE_O = "TYPE_O"
    TYPE_A = "TYPE_A"
    TYPE_B = "TYPE_B"
    TYPE_C = "TYPE_C"
    TYPE_D = "TYPE_D"

    @property
    def info(self) -> "DamageInfo":
        return DAMAGE_INFO[self]

    @property
    def display_name(self) -> str:
        return self.info.display_name

    @property
    def width_range(self) -> str:
        return self.info.width_range

    @property
    def symptoms(self) -> str:
        return self.info.symptoms

    @property
    def recommendation(self) -> str:
        return self.info.recommendation

    @property
    def color(self) -> str:
        return self.info.color


@dataclass(frozen=True)
class DamageInfo:
    display_name: str
    width_range: str
    symptoms: str
    recommendation: str
    color: str


DAMAGE_INFO: dict[DamageType, DamageInfo] = {
    DamageType.TYPE_O: DamageInfo(
        display_name="Type O Damage",
        width_range="Undamaged",
        symptoms="No damage or very slight damage, nothing visible to the eye",
        recommendation="Routine inspection is sufficient.",
        color="#4CAF50",
    ),
    DamageType.TYPE_A: DamageInfo(
        display_name="Type A Damage",
        width_range="w ≤ 0.5 mm",
        symptoms="Light damage with hairline cracks",
        recommendation="Cosmetic repair is enough; structural risk is low.",
        color="#8BC34A",
    ),
    DamageType.TYPE_B: DamageInfo(
        display_name="Type B Damage",
        width_range="0.5 mm < w ≤ 3 mm",
        symptoms="Visible cracks, crushing of the concrete cover has started",
        recommendation="Have the element inspected by an expert and repaired.",
        color="#FFA726",
    ),
    DamageType.TYPE_C: DamageInfo(
        display_name="Type C Damage",
        width_range="Cover spalling",
        symptoms="Heavy damage, the outer concrete cover has spalled off",
        recommendation="Urgent intervention is required; restrict use of the building.",
        color="#FF7043",
    ),
    DamageType.TYPE_D: DamageInfo(
        display_name="Type D Damage",
        width_range="Critical damage",
        symptoms="Reinforcement buckling, core crushing - severe damage / collapse risk",
        recommendation="Evacuate the building immediately and keep clear until assessed.",
        color="#E53935",
    ),
}
