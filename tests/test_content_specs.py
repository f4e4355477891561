import unittest
from datetime import datetime

from outliers.content_specs import (
    analyze_content_specs,
    is_series_video,
    longform_length_bucket,
    optimal_length,
    series_vs_standalone,
    shorts_length_bucket,
    upload_timing,
)
from outliers.models import ContentSpecs, VideoRecord
from outliers.patterns import extract_patterns


def _video(title, views, duration="PT8M", published_at=None):
    return VideoRecord(
        id=title,
        title=title,
        view_count=views,
        duration_raw=duration,
        published_at=published_at,
    )


class LengthBucketTests(unittest.TestCase):
    def test_shorts_buckets(self):
        self.assertEqual(shorts_length_bucket(15), "0-15s")
        self.assertEqual(shorts_length_bucket(16), "16-30s")
        self.assertEqual(shorts_length_bucket(45), "31-45s")
        self.assertEqual(shorts_length_bucket(60), "46-60s")
        self.assertEqual(shorts_length_bucket(61), "61-180s")

    def test_longform_buckets_use_whole_minutes(self):
        self.assertEqual(longform_length_bucket(239), "1-3 min")
        self.assertEqual(longform_length_bucket(240), "4-6 min")
        self.assertEqual(longform_length_bucket(659), "7-10 min")
        self.assertEqual(longform_length_bucket(900), "11-15 min")
        self.assertEqual(longform_length_bucket(960), "15+ min")


class OptimalLengthTests(unittest.TestCase):
    def test_shorts_bucket_needs_two_videos(self):
        videos = [
            _video("a", 100, "PT20S"),
            _video("b", 300, "PT20S"),
            _video("c", 5000, "PT50S"),
        ]
        length = optimal_length(videos, is_short_form=True)
        self.assertEqual(length.range, "16-30s")
        self.assertEqual(length.avg_views, 200)
        self.assertEqual(length.description, "Shorts in 16-30s range perform best for this channel")

    def test_shorts_default_without_support(self):
        videos = [_video("a", 100, "PT20S"), _video("b", 300, "PT50S")]
        length = optimal_length(videos, is_short_form=True)
        self.assertEqual(length.range, "31-45s")
        self.assertEqual(length.avg_views, 0)

    def test_single_long_form_video_counts(self):
        videos = [
            _video("a", 900, "PT5M"),
            _video("b", 100, "PT8M"),
            _video("c", 200, "PT8M"),
        ]
        length = optimal_length(videos, is_short_form=False)
        self.assertEqual(length.range, "4-6 min")
        self.assertEqual(length.avg_views, 900)
        self.assertEqual(length.description, "Videos in 4-6 min range perform best for this channel")

    def test_malformed_duration_is_shortest_bucket(self):
        length = optimal_length([_video("a", 100, "garbage")], is_short_form=False)
        self.assertEqual(length.range, "1-3 min")


class UploadTimingTests(unittest.TestCase):
    def test_ranked_weekdays(self):
        videos = [
            _video("mon", 1000, published_at=datetime(2024, 7, 1)),
            _video("tue", 500, published_at=datetime(2024, 7, 2)),
            _video("wed", 250, published_at=datetime(2024, 7, 3)),
            _video("undated", 99_999),
        ]
        timing = upload_timing(videos)
        self.assertEqual(timing.best_days, ("Monday", "Tuesday"))
        self.assertEqual(timing.worst_days, ("Tuesday", "Wednesday"))
        self.assertEqual(timing.insight, "Monday uploads average 300% more views than Wednesday")

    def test_two_days_are_not_enough(self):
        videos = [
            _video("mon", 1000, published_at=datetime(2024, 7, 1)),
            _video("tue", 500, published_at=datetime(2024, 7, 2)),
        ]
        timing = upload_timing(videos)
        self.assertEqual(timing.best_days, ("Monday", "Tuesday"))
        self.assertEqual(timing.insight, "Not enough data for timing insights")

    def test_zero_view_day_has_no_lift(self):
        videos = [
            _video("mon", 100, published_at=datetime(2024, 7, 1)),
            _video("tue", 50, published_at=datetime(2024, 7, 2)),
            _video("wed", 0, published_at=datetime(2024, 7, 3)),
        ]
        self.assertEqual(upload_timing(videos).insight, "Not enough data for timing insights")

    def test_undated_batch(self):
        timing = upload_timing([_video("a", 100)])
        self.assertEqual(timing.best_days, ())
        self.assertEqual(timing.worst_days, ())


class SeriesTests(unittest.TestCase):
    def test_series_detection(self):
        self.assertTrue(is_series_video(_video("Road trip part 2", 1)))
        self.assertTrue(is_series_video(_video("Episode 4: the return", 1)))
        self.assertFalse(is_series_video(_video("Haunted house (1/3)", 1)))
        self.assertTrue(is_series_video(_video("Haunted house (1/3)", 1), extract_patterns("Haunted house (1/3)")))

    def test_series_perform_better(self):
        videos = [
            _video("Road trip part 1", 1000),
            _video("Road trip part 2", 800),
            _video("Cooking basics", 100),
            _video("Garden tour", 200),
        ]
        comparison = series_vs_standalone(videos)
        self.assertEqual(comparison.series_performance, 900)
        self.assertEqual(comparison.standalone_performance, 150)
        self.assertTrue(comparison.recommendation.startswith("Series content performs significantly better"))

    def test_standalone_perform_better(self):
        videos = [
            _video("Road trip part 1", 100),
            _video("Road trip part 2", 200),
            _video("Cooking basics", 1000),
            _video("Garden tour", 800),
        ]
        comparison = series_vs_standalone(videos)
        self.assertTrue(comparison.recommendation.startswith("Standalone videos perform better"))

    def test_similar_performance(self):
        videos = [
            _video("Road trip part 1", 500),
            _video("Road trip part 2", 500),
            _video("Cooking basics", 450),
            _video("Garden tour", 550),
        ]
        comparison = series_vs_standalone(videos)
        self.assertEqual(
            comparison.recommendation,
            "Series and standalone content perform similarly - maintain current mix",
        )

    def test_one_series_video_is_not_enough(self):
        videos = [_video("Road trip part 1", 500), _video("Cooking basics", 450), _video("Garden tour", 550)]
        comparison = series_vs_standalone(videos)
        self.assertEqual(comparison.series_performance, 500)
        self.assertEqual(comparison.recommendation, "Insufficient data for series analysis")


class AnalyzeContentSpecsTests(unittest.TestCase):
    def test_empty_format(self):
        specs = analyze_content_specs([], is_short_form=True)
        self.assertEqual(specs, ContentSpecs())
        self.assertEqual(specs.optimal_length.range, "Insufficient data")
        self.assertEqual(specs.upload_timing.insight, "Not enough data to determine optimal upload timing")

    def test_combines_findings(self):
        videos = [_video("Clip one", 100, "PT20S"), _video("Clip two", 300, "PT25S")]
        specs = analyze_content_specs(videos, is_short_form=True)
        self.assertEqual(specs.optimal_length.range, "16-30s")
        self.assertEqual(specs.series_vs_standalone.standalone_performance, 200)


if __name__ == "__main__":
    unittest.main()
