import os
import unittest

from outliers.config import AnalysisConfig
from outliers.errors import ConfigError


class ConfigTests(unittest.TestCase):
    def _with_env(self, values):
        previous = {name: os.environ.get(name) for name in values}
        for name, value in values.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value

        def restore():
            for name, value in previous.items():
                if value is None:
                    os.environ.pop(name, None)
                else:
                    os.environ[name] = value

        self.addCleanup(restore)

    def test_default_outlier_threshold(self):
        self._with_env({"OUTLIER_THRESHOLD": None, "MIN_PATTERN_SUPPORT": None})
        config = AnalysisConfig.from_env()
        self.assertEqual(config.outlier_threshold, 2.0)
        self.assertEqual(config.min_pattern_support, 2)
        self.assertEqual(config.max_patterns, 10)
        self.assertEqual(config.max_recommendations, 5)

    def test_env_overrides(self):
        self._with_env({"OUTLIER_THRESHOLD": "3.5", "MAX_OUTLIERS": "4", "LOG_LEVEL": "debug"})
        config = AnalysisConfig.from_env()
        self.assertEqual(config.outlier_threshold, 3.5)
        self.assertEqual(config.max_outliers, 4)
        self.assertEqual(config.log_level, "DEBUG")

    def test_non_numeric_value_raises(self):
        self._with_env({"MAX_PATTERNS": "ten"})
        with self.assertRaises(ConfigError):
            AnalysisConfig.from_env()

    def test_support_floor_cannot_be_lowered(self):
        with self.assertRaises(ConfigError):
            AnalysisConfig(min_pattern_support=1)

    def test_threshold_must_be_positive(self):
        with self.assertRaises(ConfigError):
            AnalysisConfig(outlier_threshold=0)

    def test_to_dict_uses_env_names(self):
        settings = AnalysisConfig().to_dict()
        self.assertEqual(settings["OUTLIER_THRESHOLD"], 2.0)
        self.assertEqual(settings["MAX_CROSS_FORMAT_INSIGHTS"], 5)
        self.assertEqual(settings["MAX_ENHANCED_INSIGHTS"], 6)

    def test_unknown_log_level_raises(self):
        self._with_env({"LOG_LEVEL": "verbose"})
        with self.assertRaises(ConfigError):
            AnalysisConfig.from_env()

    def test_log_level_must_be_a_level_name(self):
        with self.assertRaises(ConfigError):
            AnalysisConfig(log_level="LOUD")
        self.assertEqual(AnalysisConfig(log_level="WARNING").log_level, "WARNING")

    def test_enhanced_insight_cap_must_be_positive(self):
        with self.assertRaises(ConfigError):
            AnalysisConfig(max_enhanced_insights=0)


if __name__ == "__main__":
    unittest.main()
