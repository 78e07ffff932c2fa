"""SI base units, all standard.

Mass is anchored on the gram so that ``kilo(gram)`` composes like every other
prefixed unit.
"""

from __future__ import annotations

from unitalgebra.units import from_base_unit, make_standard

METER = make_standard("meter", "m")
SECOND = make_standard("second", "s")
GRAM = make_standard("gram", "g")
AMPERE = make_standard("ampere", "A")
KELVIN = make_standard("kelvin", "K")
MOLE = make_standard("mole", "mol")
CANDELA = make_standard("candela", "cd")

BASE_UNITS = (METER, SECOND, GRAM, AMPERE, KELVIN, MOLE, CANDELA)

meter = from_base_unit(METER)
second = from_base_unit(SECOND)
gram = from_base_unit(GRAM)
ampere = from_base_unit(AMPERE)
kelvin = from_base_unit(KELVIN)
mole = from_base_unit(MOLE)
candela = from_base_unit(CANDELA)
