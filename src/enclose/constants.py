import math
from typing import Final

from enclose.interval import Interval

EMPTY: Final = Interval()
WHOLE: Final = Interval(-math.inf, math.inf)
ZERO: Final = Interval(0.0)
ONE: Final = Interval(1.0)
