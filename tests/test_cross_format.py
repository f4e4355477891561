import unittest
from datetime import datetime

from outliers.cross_format import cross_insights, enhanced_combined_insights, uploads_per_week
from outliers.models import FormatAnalysis, OutlierVideo, TitleAnalysis, TopicInsight, VideoRecord


def _outlier(video_id, published_at=None):
    record = VideoRecord(
        id=video_id,
        title="x",
        view_count=1000,
        duration_raw="PT10M",
        published_at=published_at,
    )
    return OutlierVideo(record=record, multiplier=3.0)


def _topic(name):
    return TopicInsight(topic=name, avg_views=1000, count=2, examples=("a", "b"))


def _format(total=10, average=100.0, outliers=(), topics=(), title_length=0):
    return FormatAnalysis(
        total_videos=total,
        average_views=average,
        outliers=tuple(outliers),
        best_performing_topics=tuple(topics),
        outlier_count=len(outliers),
        title_analysis=TitleAnalysis(avg_title_length=title_length),
    )


class CrossFormatTests(unittest.TestCase):
    def test_shorts_outperform_long_form(self):
        insights = cross_insights(_format(average=50_000), _format(average=300_000))
        self.assertEqual(
            insights,
            ["Shorts average 300K views vs 50K for long-form - focus more on Shorts"],
        )

    def test_long_form_outperforms_shorts(self):
        insights = cross_insights(_format(average=90_000), _format(average=60_000))
        self.assertEqual(len(insights), 1)
        self.assertIn("long-form content resonates better", insights[0])

    def test_similar_averages_yield_nothing(self):
        self.assertEqual(cross_insights(_format(average=100), _format(average=140)), [])

    def test_empty_formats_yield_nothing(self):
        self.assertEqual(cross_insights(_format(0, 0.0), _format(0, 0.0)), [])

    def test_shared_topics(self):
        longform = _format(topics=[_topic("Gaming"), _topic("Python"), _topic("Travel")])
        shorts = _format(topics=[_topic("Python Tips"), _topic("gaming")])
        insights = cross_insights(longform, shorts)
        self.assertEqual(
            insights,
            ["Topics that work well in both formats: Gaming, Python - create more content around these"],
        )

    def test_overlap_only_checks_top_three(self):
        longform = _format(topics=[_topic("A1"), _topic("B2"), _topic("C3"), _topic("Music")])
        shorts = _format(topics=[_topic("Music")])
        self.assertEqual(cross_insights(longform, shorts), [])

    def test_clip_long_form_into_shorts(self):
        longform = _format(total=10, outliers=[_outlier("a")])
        shorts = _format(total=2)
        self.assertEqual(
            cross_insights(longform, shorts),
            ["Turn your best long-form content into Short clips for wider reach"],
        )

    def test_expand_shorts_into_long_form(self):
        longform = _format(total=3)
        shorts = _format(total=10, outliers=[_outlier("a")])
        self.assertEqual(
            cross_insights(longform, shorts),
            ["Expand your best Shorts into detailed long-form tutorials"],
        )

    def test_recent_outliers_are_not_cross_format(self):
        longform = _format(outliers=[_outlier("a", datetime(2024, 6, 10))])
        self.assertEqual(cross_insights(longform, _format()), [])

    def test_priority_order_and_cap(self):
        longform = _format(
            total=10,
            average=10_000,
            outliers=[_outlier("a", datetime(2024, 6, 10))],
            topics=[_topic("Gaming")],
        )
        shorts = _format(total=2, average=40_000, topics=[_topic("Gaming")])
        insights = cross_insights(longform, shorts)
        self.assertEqual(len(insights), 3)
        self.assertIn("focus more on Shorts", insights[0])
        self.assertIn("Gaming", insights[1])
        self.assertIn("Short clips", insights[2])

        capped = cross_insights(longform, shorts, limit=2)
        self.assertEqual(capped, insights[:2])


class UploadsPerWeekTests(unittest.TestCase):
    def test_span_of_batch(self):
        times = [datetime(2024, 1, 1), datetime(2024, 1, 15)]
        self.assertEqual(uploads_per_week(10, times), 5.0)

    def test_short_span_counts_as_one_week(self):
        times = [datetime(2024, 1, 1), datetime(2024, 1, 3)]
        self.assertEqual(uploads_per_week(4, times), 4.0)

    def test_missing_timestamps_assume_twelve_weeks(self):
        self.assertEqual(uploads_per_week(24, [datetime(2024, 1, 1)]), 2.0)
        self.assertEqual(uploads_per_week(24, []), 2.0)


class EnhancedCombinedInsightTests(unittest.TestCase):
    def _matching(self, insights, label):
        return [insight for insight in insights if insight.startswith(label)]

    def test_empty_batch(self):
        self.assertEqual(enhanced_combined_insights(_format(0, 0.0), _format(0, 0.0)), [])

    def test_low_volume(self):
        insights = enhanced_combined_insights(_format(total=10), _format(total=10))
        self.assertEqual(
            self._matching(insights, "📊 VOLUME OPPORTUNITY"),
            [
                "📊 VOLUME OPPORTUNITY: Currently 1.7 uploads/week - posting daily (7+/week) "
                "gives more videos the chance to break out"
            ],
        )

    def test_daily_volume_is_enough(self):
        times = [datetime(2024, 1, 1), datetime(2024, 1, 8)]
        insights = enhanced_combined_insights(_format(total=10), _format(total=10), published_times=times)
        self.assertEqual(self._matching(insights, "📊 VOLUME OPPORTUNITY"), [])

    def test_shorts_heavy_mix(self):
        insights = enhanced_combined_insights(_format(total=1), _format(total=9))
        self.assertEqual(len(self._matching(insights, "💰 MONETIZATION OPTIMIZATION")), 1)
        self.assertEqual(self._matching(insights, "🚀 REACH EXPANSION"), [])

    def test_long_form_heavy_mix(self):
        insights = enhanced_combined_insights(_format(total=10), _format(total=2))
        self.assertEqual(len(self._matching(insights, "🚀 REACH EXPANSION")), 1)
        self.assertEqual(self._matching(insights, "💰 MONETIZATION OPTIMIZATION"), [])

    def test_balanced_mix(self):
        insights = enhanced_combined_insights(_format(total=5), _format(total=5))
        self.assertEqual(self._matching(insights, "💰 MONETIZATION OPTIMIZATION"), [])
        self.assertEqual(self._matching(insights, "🚀 REACH EXPANSION"), [])

    def test_format_replication_needs_more_than_triple(self):
        strong = enhanced_combined_insights(_format(average=100), _format(average=400))
        self.assertEqual(len(self._matching(strong, "⚡ FORMAT REPLICATION")), 1)

        exact = enhanced_combined_insights(_format(average=100), _format(average=300))
        self.assertEqual(self._matching(exact, "⚡ FORMAT REPLICATION"), [])

    def test_systematic_scaling_needs_outliers(self):
        with_outliers = enhanced_combined_insights(_format(outliers=[_outlier("a")]), _format())
        self.assertEqual(len(self._matching(with_outliers, "🎯 SYSTEMATIC SCALING")), 1)

        without = enhanced_combined_insights(_format(), _format())
        self.assertEqual(self._matching(without, "🎯 SYSTEMATIC SCALING"), [])

    def test_recent_outliers_against_batch_anchor(self):
        longform = _format(outliers=[_outlier("a", datetime(2024, 6, 10)), _outlier("b", datetime(2024, 1, 1))])
        insights = enhanced_combined_insights(
            longform, _format(), published_times=[datetime(2024, 1, 1), datetime(2024, 6, 30)]
        )
        trend = self._matching(insights, "🔥 TREND CAPITALIZATION")
        self.assertEqual(len(trend), 1)
        self.assertIn("1 outlier(s) published in the last 30 days", trend[0])

    def test_no_timestamps_skip_dated_checks(self):
        longform = _format(outliers=[_outlier("a", datetime(2024, 6, 10)), _outlier("b", datetime(2023, 1, 1))])
        insights = enhanced_combined_insights(longform, _format())
        self.assertEqual(self._matching(insights, "🔥 TREND CAPITALIZATION"), [])
        self.assertEqual(self._matching(insights, "♻️ CONTENT RECYCLING"), [])

    def test_competitive_moat_counts_distinct_topics(self):
        longform = _format(topics=[_topic(name) for name in ("A", "B", "C", "D")])
        shorts = _format(topics=[_topic(name) for name in ("D", "E", "F")])
        insights = enhanced_combined_insights(longform, shorts)
        self.assertEqual(
            self._matching(insights, "🏰 COMPETITIVE MOAT"),
            ["🏰 COMPETITIVE MOAT: 6 distinct topics perform well - invest in the harder-to-copy content around them"],
        )

        narrow = enhanced_combined_insights(longform, _format(topics=[_topic("E")]))
        self.assertEqual(self._matching(narrow, "🏰 COMPETITIVE MOAT"), [])

    def test_mobile_title_length_ignores_empty_format(self):
        insights = enhanced_combined_insights(_format(title_length=80), _format(total=0, average=0.0))
        self.assertEqual(
            self._matching(insights, "📱 MOBILE OPTIMIZATION"),
            [
                "📱 MOBILE OPTIMIZATION: Average title length is 80 characters - "
                "keep titles under 60 characters so they are not cut off on mobile"
            ],
        )

        mixed = enhanced_combined_insights(_format(title_length=80), _format(title_length=40))
        self.assertEqual(self._matching(mixed, "📱 MOBILE OPTIMIZATION"), [])

    def test_content_recycling(self):
        longform = _format(outliers=[_outlier("a", datetime(2024, 1, 1))])
        insights = enhanced_combined_insights(
            longform, _format(), published_times=[datetime(2024, 1, 1), datetime(2024, 7, 1)]
        )
        self.assertEqual(
            self._matching(insights, "♻️ CONTENT RECYCLING"),
            ["♻️ CONTENT RECYCLING: Your oldest outlier is 6 months old - repackage older hits with modern editing"],
        )

    def test_priority_order_and_cap(self):
        longform = _format(
            total=1,
            average=100,
            outliers=[_outlier("a", datetime(2024, 1, 1)), _outlier("b", datetime(2024, 7, 1))],
            topics=[_topic(name) for name in ("A", "B", "C")],
            title_length=90,
        )
        shorts = _format(total=9, average=400, topics=[_topic(name) for name in ("D", "E", "F")], title_length=90)
        times = [datetime(2024, 1, 1), datetime(2024, 7, 10)]

        everything = enhanced_combined_insights(longform, shorts, limit=10, published_times=times)
        self.assertEqual(
            [insight.split(":")[0] for insight in everything],
            [
                "📊 VOLUME OPPORTUNITY",
                "💰 MONETIZATION OPTIMIZATION",
                "⚡ FORMAT REPLICATION",
                "🎯 SYSTEMATIC SCALING",
                "🔥 TREND CAPITALIZATION",
                "🏰 COMPETITIVE MOAT",
                "📱 MOBILE OPTIMIZATION",
                "♻️ CONTENT RECYCLING",
            ],
        )

        capped = enhanced_combined_insights(longform, shorts, published_times=times)
        self.assertEqual(capped, everything[:6])


if __name__ == "__main__":
    unittest.main()
