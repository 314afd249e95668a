import pytest

from chronokit import Instant, PluginConflictError
from chronokit.application.plugins import PluginRegistry, install_methods
from chronokit.domain.time import CAPABILITIES
from chronokit.plugins import ALL_PLUGINS, zodiac_plugin


class LocalInstant(Instant):
    pass


def _fiscal_label(caps, instant, prefix="FY"):
    return f"{prefix}{caps.internal_date(instant).year % 100:02d}"


def fiscal_label_plugin(host, caps):
    install_methods(host, caps, fiscal_label=_fiscal_label)


def test_registering_twice_is_a_no_op():
    assert Instant.register(zodiac_plugin) is False
    assert Instant._registry.is_registered(zodiac_plugin)


def test_all_plugins_are_registered():
    registered = Instant._registry.plugins

    assert all(plugin in registered for plugin in ALL_PLUGINS)


def test_plugin_methods_bind_to_the_host():
    LocalInstant.use(fiscal_label_plugin)

    instant = LocalInstant("2025-01-01T00:00:00Z")

    assert instant.fiscal_label() == "FY25"
    assert instant.fiscal_label(prefix="AY") == "AY25"
    assert isinstance(instant.add(1, "day"), LocalInstant)
    assert not hasattr(Instant("2025-01-01"), "fiscal_label")


def test_registry_runs_each_plugin_once():
    calls = []
    registry = PluginRegistry()

    def plugin(host, caps):
        calls.append(host)

    assert registry.apply(plugin, LocalInstant, CAPABILITIES) is True
    assert registry.apply(plugin, LocalInstant, CAPABILITIES) is False
    assert calls == [LocalInstant]
    assert registry.plugins == [plugin]


def test_conflicting_method_names_are_rejected():
    class Host:
        def format(self):
            return "core"

    with pytest.raises(PluginConflictError):
        install_methods(Host, CAPABILITIES, format=_fiscal_label)

    install_methods(Host, CAPABILITIES, fiscal_label=_fiscal_label)
    with pytest.raises(PluginConflictError):
        install_methods(Host, CAPABILITIES, fiscal_label=_fiscal_label)


def test_capabilities_expose_internal_state():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("UTC+06:00")

    assert CAPABILITIES.internal_date(shown).hour == 6
    assert CAPABILITIES.offset(shown) == 360
    assert CAPABILITIES.cast("2025-01-01", "compare").origin == "compare"

    rebuilt = CAPABILITIES.with_native(shown, CAPABILITIES.internal_date(shown).replace(hour=8), "custom")
    assert rebuilt.format("HH:mm") == "08:00"
    assert rebuilt.offset == "UTC+06:00"
    assert rebuilt.origin == "custom"


def _quarter_label(caps, instant):
    return f"Q{(caps.internal_date(instant).month - 1) // 3 + 1}"


def quarter_label_plugin(host, caps):
    install_methods(host, caps, quarter_label=_quarter_label)


def test_subclass_registration_does_not_block_the_base_class():
    class BaseInstant(Instant):
        pass

    class ScopedInstant(BaseInstant):
        pass

    assert ScopedInstant.register(quarter_label_plugin) is True
    assert BaseInstant.register(quarter_label_plugin) is True

    assert BaseInstant("2025-05-01").quarter_label() == "Q2"
    assert Instant._registry.is_registered(quarter_label_plugin, BaseInstant)
    assert Instant._registry.is_registered(quarter_label_plugin, ScopedInstant)
    assert not Instant._registry.is_registered(quarter_label_plugin, Instant)
    assert Instant._registry.plugins.count(quarter_label_plugin) == 1


def test_subclass_inherits_plugins_registered_on_its_base():
    class BaseInstant(Instant):
        pass

    class ScopedInstant(BaseInstant):
        pass

    assert BaseInstant.register(quarter_label_plugin) is True
    assert ScopedInstant.register(quarter_label_plugin) is False
    assert ScopedInstant("2025-11-30").quarter_label() == "Q4"
