import json
import tempfile
import unittest
from pathlib import Path

from managed_plugins import ConfigError, HookRegistry, start
from managed_plugins.config.defaults import default_config_path
from managed_plugins.plugins.hooks import ACTIVE_PLUGINS_HOOK, NETWORK_ACTIVE_PLUGINS_HOOK


class BootstrapTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tempdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tempdir.name)
        self.site_root = self.root / "web" / "wp"
        self.site_root.mkdir(parents=True)
        self.config_path = default_config_path(self.site_root)
        self.config_path.parent.mkdir(parents=True)

    def tearDown(self) -> None:
        self.tempdir.cleanup()

    def test_default_config_path(self) -> None:
        self.assertEqual(self.config_path, self.root / "web" / "config" / "managed-plugins.json")

    def test_start_wires_filters(self) -> None:
        self.config_path.write_text(
            json.dumps(
                {
                    "global": {"disabled": ["a/a.php"]},
                    "environments": {"staging": {"required": ["b/b.php"]}},
                }
            ),
            encoding="utf-8",
        )
        calls = []

        def installed():
            calls.append(1)
            return {"b/b.php": {}, "c/c.php": {}}

        registry = HookRegistry()
        managed = start(self.config_path, installed, registry=registry, environ={"WP_ENV": "staging"})
        self.assertEqual(managed.environment, "staging")
        self.assertEqual(calls, [])
        self.assertTrue(registry.has_filter(ACTIVE_PLUGINS_HOOK))
        self.assertTrue(registry.has_filter(NETWORK_ACTIVE_PLUGINS_HOOK))
        self.assertEqual(
            registry.apply_filters(ACTIVE_PLUGINS_HOOK, ["a/a.php", "c/c.php"]),
            ["c/c.php", "b/b.php"],
        )
        self.assertEqual(managed.reconciler.required_missing_count(), 0)
        self.assertEqual(calls, [1])

    def test_missing_config_applies_no_rules(self) -> None:
        managed = start(self.config_path, {"a/a.php": {}}, environ={})
        self.assertEqual(managed.environment, "production")
        self.assertEqual(managed.reconciler.filter_active(["a/a.php"]), ["a/a.php"])

    def test_broken_config_outside_production_stops_start(self) -> None:
        self.config_path.write_text("{", encoding="utf-8")
        with self.assertLogs("managed_plugins.config", level="ERROR"):
            with self.assertRaises(ConfigError):
                start(self.config_path, {}, environ={}, constants={"WP_ENVIRONMENT_TYPE": "development"})

    def test_broken_config_in_production_fails_open(self) -> None:
        self.config_path.write_text("{", encoding="utf-8")
        with self.assertLogs("managed_plugins.config", level="ERROR"):
            managed = start(self.config_path, {}, environ={"HOME": str(self.root)})
        self.assertEqual(managed.environment, "production")
        self.assertEqual(managed.resolver.disabled(), ())


if __name__ == "__main__":
    unittest.main()
