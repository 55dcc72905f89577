# voice_control/numerals.py
from typing import Optional, Union

SPOKEN_NUMERALS = {
    "uno": 1,
    "dos": 2,
}


def normalize_numeral(token: Optional[str]) -> Union[int, str, None]:
    """Map a spoken Spanish number word to its integer value.

    Unknown tokens are returned unchanged.
    """
    return SPOKEN_NUMERALS.get(token, token)
