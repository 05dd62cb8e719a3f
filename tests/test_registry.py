"""Tests for the Registry bulk operations and the functional builder."""

import pytest

from env_vars_config import InMemoryEnvironment
from env_vars_config.errors import DuplicateVariable, InvalidVariableType, UnknownVariable
from env_vars_config.registry import Registry, env_vars_config
from env_vars_config.variable import EnvVar


@pytest.fixture()
def config(env):
    return env_vars_config(
        SERVER_ADDRESS=(str, "0.0.0.0:8080"),
        WORKERS_COUNT=(int, 32),
    )


class TestAccess:
    def test_names_keep_declaration_order(self, config):
        assert config.names == ("SERVER_ADDRESS", "WORKERS_COUNT")
        assert list(config) == ["SERVER_ADDRESS", "WORKERS_COUNT"]
        assert len(config) == 2

    def test_attribute_item_and_get(self, env, config):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        assert config.SERVER_ADDRESS == "127.0.0.1:9090"
        assert config["WORKERS_COUNT"] == 32
        assert config.get("WORKERS_COUNT") == 32

    def test_unknown_name(self, config):
        with pytest.raises(UnknownVariable):
            config["NOPE"]
        with pytest.raises(KeyError):
            config.publish("NOPE")
        with pytest.raises(AttributeError):
            config.NOPE

    def test_contains(self, config):
        assert "WORKERS_COUNT" in config
        assert "NOPE" not in config

    def test_variable_returns_env_var(self, config):
        assert isinstance(config.variable("WORKERS_COUNT"), EnvVar)

    def test_duplicate_declaration(self, env):
        with pytest.raises(DuplicateVariable):
            Registry.from_declarations([("A", int, 1), ("A", int, 2)])


class TestInit:
    def test_init_resolves_everything(self, env, config):
        config.init()
        assert all(variable.is_resolved for variable in config.variables)
        assert env.get("_WORKERS_COUNT_WAS_MISSING") == "true"
        assert env.get("_SERVER_ADDRESS_WAS_MISSING") == "true"

    def test_init_surfaces_the_first_parse_error(self, env, config):
        env.set("WORKERS_COUNT", "many")
        with pytest.raises(InvalidVariableType) as excinfo:
            config.init()
        assert excinfo.value.name == "WORKERS_COUNT"


class TestCheckAllPresent:
    def test_workers_count_missing(self, env, config, logged_warnings):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        assert config.WORKERS_COUNT == 32
        assert config.is_missing("WORKERS_COUNT")
        assert config.check_all_present() is False

    def test_all_present(self, env, config, logged_warnings):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        env.set("WORKERS_COUNT", "8")
        assert config.check_all_present() is True
        assert logged_warnings() == []

    def test_unresolved_unset_variable_is_not_present(self, env, config):
        assert not any(variable.is_resolved for variable in config.variables)
        assert config.check_all_present() is False

    def test_repeats_warnings_each_call(self, env, config, logged_warnings):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        config.check_all_present()
        first = len(logged_warnings())
        config.check_all_present()
        config.check_all_present()
        # one warning per call, the first coming from resolution
        assert first == 1
        assert len(logged_warnings()) == 3
        assert {w["variable"] for w in logged_warnings()} == {"WORKERS_COUNT"}

    def test_already_resolved_variable_warns_once_per_call(self, env, config, logged_warnings):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        assert config.WORKERS_COUNT == 32
        assert len(logged_warnings()) == 1
        config.check_all_present()
        assert len(logged_warnings()) == 2

    def test_setting_the_variable_later_does_not_clear_missing(self, env, config):
        config.init()
        env.set("WORKERS_COUNT", "8")
        assert config.check_all_present() is False


class TestPublish:
    def test_publish_single(self, env, config):
        assert config.publish("WORKERS_COUNT") == "32"
        assert env.get("WORKERS_COUNT") == "32"
        assert env.get("SERVER_ADDRESS") is None

    def test_publish_all(self, env, config):
        env.set("SERVER_ADDRESS", "127.0.0.1:9090")
        config.publish_all()
        assert env.get("SERVER_ADDRESS") == "127.0.0.1:9090"
        assert env.get("WORKERS_COUNT") == "32"

    def test_publish_is_repeatable(self, env, config):
        config.publish("WORKERS_COUNT")
        env.set("WORKERS_COUNT", "0")
        config.publish("WORKERS_COUNT")
        assert env.get("WORKERS_COUNT") == "32"


def test_builder_with_bound_environment():
    bound = InMemoryEnvironment({"OTEL_SERVICE_NAME": "orders"})
    config = env_vars_config(environment=bound, OTEL_SERVICE_NAME=(str, "test-service"))
    assert config.OTEL_SERVICE_NAME == "orders"
    assert config.check_all_present() is True
