"""The predicate catalog, grouped into mixins and composed into ``Assertion``.

Build a narrower or extended source by composing the mixins you need:

```python
from klaw_assert.assertions import StringAssertions
from klaw_assert.dispatch import AbstractAssertion


class UsernameAssertion(AbstractAssertion, StringAssertions):
    pass
```
"""

from __future__ import annotations

from klaw_assert.assertions.arrays import ArrayAssertions
from klaw_assert.assertions.booleans import BooleanAssertions
from klaw_assert.assertions.comparison import ComparisonAssertions
from klaw_assert.assertions.custom import CustomAssertions
from klaw_assert.assertions.environment import EnvironmentAssertions, compare_versions
from klaw_assert.assertions.filesystem import FileSystemAssertions
from klaw_assert.assertions.null_empty import NullEmptyAssertions
from klaw_assert.assertions.numeric import NumericAssertions
from klaw_assert.assertions.objects import ObjectAssertions
from klaw_assert.assertions.strings import StringAssertions
from klaw_assert.assertions.types import TypeAssertions
from klaw_assert.assertions.validation import IpFlag, ValidationAssertions
from klaw_assert.dispatch import AbstractAssertion

__all__ = [
    'ArrayAssertions',
    'Assertion',
    'BooleanAssertions',
    'ComparisonAssertions',
    'CustomAssertions',
    'EnvironmentAssertions',
    'FileSystemAssertions',
    'IpFlag',
    'NullEmptyAssertions',
    'NumericAssertions',
    'ObjectAssertions',
    'StringAssertions',
    'TypeAssertions',
    'ValidationAssertions',
    'compare_versions',
]


class Assertion(
    AbstractAssertion,
    ArrayAssertions,
    StringAssertions,
    NumericAssertions,
    ObjectAssertions,
    FileSystemAssertions,
    ValidationAssertions,
    CustomAssertions,
    EnvironmentAssertions,
    TypeAssertions,
    ComparisonAssertions,
    NullEmptyAssertions,
    BooleanAssertions,
):
    """Every predicate in the catalog, plus ``null_or_*`` and ``all_*`` variants.

    Example:
        ```python
        assertion = Assertion()
        assertion.between(15, 10, 20)
        # True
        assertion.all_string(['a', 'b'])
        # True
        ```
    """
