import unittest

from offer_core.config import (
    DEFAULT_BROWSER_ARGS,
    DEFAULT_USER_AGENT,
    ScraperConfig,
    _parse_bool,
    _parse_int,
    create_config,
    create_config_from_env,
    create_config_from_mapping,
)


class ParseHelperTests(unittest.TestCase):
    def test_parse_int_falls_back_on_invalid_values(self) -> None:
        for raw in [None, "", "abc", "-5", "1.5"]:
            with self.subTest(raw=raw):
                self.assertEqual(_parse_int(raw, 7), 7)
        self.assertEqual(_parse_int(" 42 ", 7), 42)

    def test_parse_bool_accepts_common_spellings(self) -> None:
        for raw, expected in [("1", True), ("yes", True), ("OFF", False), ("false", False)]:
            with self.subTest(raw=raw):
                self.assertEqual(_parse_bool(raw, not expected), expected)
        self.assertTrue(_parse_bool("maybe", True))


class CreateConfigFromEnvTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = create_config_from_env({})
        self.assertEqual(config.port, 3005)
        self.assertEqual(config.renderer, "playwright")
        self.assertEqual(config.navigation_timeout_ms, 60000)
        self.assertEqual(config.wait_until, "domcontentloaded")
        self.assertEqual(config.user_agent, DEFAULT_USER_AGENT)
        self.assertEqual(config.browser_args, DEFAULT_BROWSER_ARGS)
        self.assertTrue(config.headless)

    def test_environment_overrides(self) -> None:
        config = create_config_from_env(
            {
                "PORT": "8080",
                "SCRAPER_RENDERER": "Static",
                "SCRAPER_HEADLESS": "false",
                "SCRAPER_TIMEOUT_MS": "15000",
                "SCRAPER_BROWSER_ARGS": "--no-sandbox, --disable-gpu",
                "SCRAPER_MAX_CONCURRENT_RENDERS": "4",
                "LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.renderer, "static")
        self.assertFalse(config.headless)
        self.assertEqual(config.navigation_timeout_ms, 15000)
        self.assertAlmostEqual(config.navigation_timeout_seconds, 15.0)
        self.assertEqual(config.browser_args, ["--no-sandbox", "--disable-gpu"])
        self.assertEqual(config.max_concurrent_renders, 4)
        self.assertEqual(config.log_level, "DEBUG")

    def test_malformed_numbers_fall_back_to_defaults(self) -> None:
        config = create_config_from_env(
            {"PORT": "port", "SCRAPER_TIMEOUT_MS": "0", "SCRAPER_MAX_CONCURRENT_RENDERS": "-1"}
        )
        self.assertEqual(config.port, 3005)
        self.assertEqual(config.navigation_timeout_ms, 60000)
        self.assertEqual(config.max_concurrent_renders, 2)

    def test_unknown_renderer_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown renderer"):
            create_config_from_env({"SCRAPER_RENDERER": "selenium"})


class CreateConfigTests(unittest.TestCase):
    def test_mapping_uses_field_names(self) -> None:
        config = create_config({"port": 9000, "headless": False, "browser_args": ["--a"]})
        self.assertEqual(config.port, 9000)
        self.assertFalse(config.headless)
        self.assertEqual(config.browser_args, ["--a"])

    def test_to_dict_round_trips_through_mapping(self) -> None:
        config = ScraperConfig(port=4000, renderer="static")
        self.assertEqual(create_config_from_mapping(config.to_dict()), config)

    def test_raises_type_error_for_unsupported_type(self) -> None:
        with self.assertRaisesRegex(TypeError, "expected a mapping or None"):
            create_config(42)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
