from typing import Annotated

from pydantic import Field

# Only positive spacings partition the tick range
type ValidatedTickSpacing = Annotated[int, Field(strict=True, gt=0)]
