"""Step definitions for keyed default accessor BDD scenarios."""
from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, when, then, scenarios, parsers

from domain.models import SettingKey
from infra.defaults import KeyedDefaultAccessor
from test.mocks import InMemoryKeyValueStore, InMemoryLogger

scenarios("../features/keyed_default.feature")


@dataclass
class AccessorContext:
    """Holds mutable state shared across BDD steps."""

    store: InMemoryKeyValueStore = field(default_factory=InMemoryKeyValueStore)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    accessor: KeyedDefaultAccessor[int] | None = None
    optional: KeyedDefaultAccessor[int | None] | None = None


@pytest.fixture()
def ctx() -> AccessorContext:
    return AccessorContext()


@given("an empty store")
def given_empty_store(ctx: AccessorContext) -> None:
    ctx.store.entries.clear()


@given(parsers.parse('a store holding "{key}" as text "{text}"'))
def given_store_with_text(ctx: AccessorContext, key: str, text: str) -> None:
    ctx.store.set(key, text)


@given(parsers.parse('an accessor for "{key}" with default {default:d}'))
def given_accessor(ctx: AccessorContext, key: str, default: int) -> None:
    ctx.accessor = KeyedDefaultAccessor(key, ctx.store, default=default, logger=ctx.logger)


@given(parsers.parse('an accessor for setting key "{member}" with default {default:d}'))
def given_enum_accessor(ctx: AccessorContext, member: str, default: int) -> None:
    ctx.accessor = KeyedDefaultAccessor(SettingKey[member], ctx.store, default=default)


@when(parsers.parse("the accessor writes {value:d}"))
def when_write(ctx: AccessorContext, value: int) -> None:
    assert ctx.accessor is not None
    ctx.accessor.write(value)


@when("the accessor removes its entry")
def when_remove(ctx: AccessorContext) -> None:
    assert ctx.accessor is not None
    ctx.accessor.remove()


@when(parsers.parse('an optional accessor for "{key}" assigns nothing'))
def when_optional_assigns_none(ctx: AccessorContext, key: str) -> None:
    ctx.optional = KeyedDefaultAccessor(key, ctx.store, value_type=int)
    ctx.optional.write(None)


@then(parsers.parse("the accessor reads {value:d}"))
def then_reads(ctx: AccessorContext, value: int) -> None:
    assert ctx.accessor is not None
    assert ctx.accessor.read() == value


@then("the optional accessor reads nothing")
def then_optional_reads_none(ctx: AccessorContext) -> None:
    assert ctx.optional is not None
    assert ctx.optional.read() is None


@then(parsers.parse('the store has no entry for "{key}"'))
def then_no_entry(ctx: AccessorContext, key: str) -> None:
    assert key not in ctx.store.entries


@then(parsers.parse('a second accessor for "{key}" with default {default:d} reads {value:d}'))
def then_second_accessor_reads(ctx: AccessorContext, key: str, default: int, value: int) -> None:
    assert KeyedDefaultAccessor(key, ctx.store, default=default).read() == value


@then(parsers.parse('a type mismatch warning was logged for "{key}"'))
def then_warning_logged(ctx: AccessorContext, key: str) -> None:
    warnings = [fields for level, _, fields in ctx.logger.events if level == "warning"]
    assert warnings and warnings[0]["key"] == key
