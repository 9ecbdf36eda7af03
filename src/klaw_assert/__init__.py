"""klaw-assert: runtime assertions for preconditions and input validation.

A catalog of predicates that check a value and raise a structured
``AssertionFailedError`` (code, message, value, property path, constraints)
when it does not hold. Predicates compose into fluent chains and lazy
collectors that report every failure at once.

Flat imports (preferred):
    from klaw_assert import that, that_all, that_null_or, lazy, assertion
    from klaw_assert import AssertionFailedError, LazyAssertionError, Code

Submodule imports (for extension):
    from klaw_assert.assertions import Assertion, StringAssertions
    from klaw_assert.dispatch import AbstractAssertion
    from klaw_assert.infrastructure import predicate
"""

# Configuration and logging
from klaw_assert._config import AssertConfig, get_config, init
from klaw_assert._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Predicates
from klaw_assert.assertions import Assertion, IpFlag

# Chains
from klaw_assert.chain import AssertionChain
from klaw_assert.codes import Code
from klaw_assert.dispatch import AbstractAssertion

# Errors
from klaw_assert.errors import (
    AssertionFailedError,
    AssertionUsageError,
    Failure,
    InvalidConfigurationError,
    LazyAssertionError,
    MissingArgumentError,
    UnknownAssertionError,
)

# Factory
from klaw_assert.factory import Assert, lazy, that, that_all, that_null_or
from klaw_assert.infrastructure import predicate
from klaw_assert.lazy import LazyAssertion, LazyChain
from klaw_assert.messages import stringify

assertion = Assertion()
"""Shared default predicate source: ``assertion.integer(5)``, ``assertion.all_string([...])``."""

__all__ = [
    # Predicates
    'AbstractAssertion',
    # Factory
    'Assert',
    # Configuration
    'AssertConfig',
    'Assertion',
    # Chains
    'AssertionChain',
    # Errors
    'AssertionFailedError',
    'AssertionUsageError',
    'Code',
    'Failure',
    'InvalidConfigurationError',
    'IpFlag',
    'LazyAssertion',
    'LazyAssertionError',
    'LazyChain',
    'MissingArgumentError',
    'UnknownAssertionError',
    # Logging
    'add_log_hook',
    'assertion',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'lazy',
    'predicate',
    'remove_log_hook',
    'stringify',
    'that',
    'that_all',
    'that_null_or',
]

__version__ = '0.1.0'
