# Sets sensible defaults to simplejson functions.

from decimal import Decimal
from typing import IO, Any, Optional

import simplejson as json


def dumps(
    obj: Any,
    indent: Optional[int] = None,
    separators: Optional[tuple[str, str]] = None,
) -> str:
    return json.dumps(
        obj,
        use_decimal=True,
        allow_nan=True,
        indent=indent,
        separators=separators,
    )


def load(fp: IO) -> Any:
    return json.load(
        fp,
        use_decimal=True,
        parse_constant=Decimal,
    )
