"""Unit tests for ConfigurationResolver and RegionConfiguration."""

import unittest

from region_ruler.domain.config import ConfigurationResolver, NameComparer
from region_ruler.domain.constants import DEFAULT_REGION_NAMES


class TestConfigurationResolverDefaults(unittest.TestCase):
    """Resolution with an empty option lookup."""

    def setUp(self) -> None:
        self.config = ConfigurationResolver().resolve({})

    def test_uses_default_names_without_custom_flag(self) -> None:
        self.assertFalse(self.config.has_custom_region_config)
        self.assertEqual(len(self.config.allowed_region_names), len(DEFAULT_REGION_NAMES))
        self.assertTrue(self.config.is_allowed_name("HELPERS"))

    def test_has_no_patterns(self) -> None:
        self.assertEqual(self.config.allowed_patterns, ())
        self.assertFalse(self.config.has_custom_pattern_config)

    def test_boolean_defaults(self) -> None:
        self.assertFalse(self.config.case_sensitive)
        self.assertTrue(self.config.allow_empty)

    def test_default_names_compare_case_insensitively(self) -> None:
        self.assertTrue(self.config.is_allowed_name("public_fields"))
        self.assertFalse(self.config.is_allowed_name("Public Fields"))


class TestConfigurationResolverNames(unittest.TestCase):
    """region_ruler.allowed_region_name handling."""

    def setUp(self) -> None:
        self.resolver = ConfigurationResolver()

    def test_splits_on_comma_and_semicolon(self) -> None:
        config = self.resolver.resolve(
            {"region_ruler.allowed_region_name": " Helpers , Main;Fields ;; , "}
        )
        self.assertTrue(config.has_custom_region_config)
        self.assertEqual(config.allowed_region_names, frozenset({"helpers", "main", "fields"}))

    def test_blank_option_falls_back_to_defaults(self) -> None:
        config = self.resolver.resolve({"region_ruler.allowed_region_name": "   "})
        self.assertFalse(config.has_custom_region_config)
        self.assertTrue(config.is_allowed_name("CONSTRUCTOR"))

    def test_separators_only_counts_as_configured_but_empty(self) -> None:
        config = self.resolver.resolve({"region_ruler.allowed_region_name": ",;,"})
        self.assertTrue(config.has_custom_region_config)
        self.assertEqual(config.allowed_region_names, frozenset())

    def test_case_sensitive_keeps_exact_names(self) -> None:
        config = self.resolver.resolve(
            {
                "region_ruler.allowed_region_name": "helpers",
                "region_ruler.case_sensitive": "true",
            }
        )
        self.assertTrue(config.is_allowed_name("helpers"))
        self.assertFalse(config.is_allowed_name("Helpers"))

    def test_case_insensitive_matches_any_casing(self) -> None:
        config = self.resolver.resolve({"region_ruler.allowed_region_name": "helpers"})
        self.assertTrue(config.is_allowed_name("HELPERS"))
        self.assertTrue(config.is_allowed_name("Helpers"))


class TestConfigurationResolverPatterns(unittest.TestCase):
    """region_ruler.allowed_regex_pattern handling."""

    def setUp(self) -> None:
        self.resolver = ConfigurationResolver()

    def test_compiles_each_token(self) -> None:
        config = self.resolver.resolve(
            {"region_ruler.allowed_regex_pattern": "^Public .*$; ^Private .*$"}
        )
        self.assertTrue(config.has_custom_pattern_config)
        self.assertEqual(
            [p.pattern for p in config.allowed_patterns], ["^Public .*$", "^Private .*$"]
        )

    def test_malformed_token_is_dropped_and_others_kept(self) -> None:
        with self.assertLogs("region_ruler.domain.config", level="DEBUG") as logs:
            config = self.resolver.resolve(
                {"region_ruler.allowed_regex_pattern": "(unclosed, ^Main$"}
            )
        self.assertEqual([p.pattern for p in config.allowed_patterns], ["^Main$"])
        self.assertTrue(config.has_custom_pattern_config)
        self.assertIn("(unclosed", logs.output[0])

    def test_all_malformed_still_counts_as_configured(self) -> None:
        config = self.resolver.resolve({"region_ruler.allowed_regex_pattern": "(a;[b"})
        self.assertEqual(config.allowed_patterns, ())
        self.assertTrue(config.has_custom_pattern_config)

    def test_patterns_ignore_case_by_default(self) -> None:
        config = self.resolver.resolve({"region_ruler.allowed_regex_pattern": "^main$"})
        self.assertIsNotNone(config.allowed_patterns[0].search("MAIN"))

    def test_patterns_respect_case_sensitivity(self) -> None:
        config = self.resolver.resolve(
            {
                "region_ruler.allowed_regex_pattern": "^main$",
                "region_ruler.case_sensitive": "True",
            }
        )
        self.assertIsNone(config.allowed_patterns[0].search("MAIN"))
        self.assertIsNotNone(config.allowed_patterns[0].search("main"))


class TestParseBool(unittest.TestCase):
    """Boolean option parsing with fallback to defaults."""

    def test_accepts_any_case_and_whitespace(self) -> None:
        self.assertTrue(ConfigurationResolver.parse_bool(" TRUE ", False))
        self.assertFalse(ConfigurationResolver.parse_bool("False", True))

    def test_unparseable_uses_default(self) -> None:
        self.assertTrue(ConfigurationResolver.parse_bool("yes", True))
        self.assertFalse(ConfigurationResolver.parse_bool("1", False))
        self.assertTrue(ConfigurationResolver.parse_bool(None, True))

    def test_unparseable_allow_empty_keeps_default(self) -> None:
        config = ConfigurationResolver().resolve({"region_ruler.allow_empty": "nope"})
        self.assertTrue(config.allow_empty)


class TestNameComparer(unittest.TestCase):
    def test_keys_fold_case_when_insensitive(self) -> None:
        comparer = NameComparer(case_sensitive=False)
        self.assertTrue(comparer.contains(comparer.keys(["Helpers"]), "HELPERS"))

    def test_keys_exact_when_sensitive(self) -> None:
        comparer = NameComparer(case_sensitive=True)
        self.assertFalse(comparer.contains(comparer.keys(["Helpers"]), "helpers"))

    def test_insensitive_names_fold_like_insensitive_patterns(self) -> None:
        config = ConfigurationResolver().resolve(
            {
                "region_ruler.allowed_region_name": "straße",
                "region_ruler.allowed_regex_pattern": "^straße$",
            }
        )
        pattern = config.allowed_patterns[0]
        for name in ("Straße", "STRAßE"):
            self.assertTrue(config.is_allowed_name(name))
            self.assertIsNotNone(pattern.search(name))
        self.assertFalse(config.is_allowed_name("STRASSE"))
        self.assertIsNone(pattern.search("STRASSE"))
