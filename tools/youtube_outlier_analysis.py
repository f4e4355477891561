#!/usr/bin/env python3
"""
YouTube Outlier Analyzer
Finds breakout videos per format and the title patterns behind them

Pipeline:
1. Short/long-form classification (duration, hashtags, format cues)
2. Per-format view baselines
3. Outlier detection (>= threshold x baseline)
4. Title pattern insights and recommendations
5. Cross-format insights

Usage:
    python3 youtube_outlier_analysis.py path/to/raw_data.json [output.json]
"""

import json
import logging
import sys
from pathlib import Path

from outliers.analyzer import OutlierPatternAnalyzer
from outliers.classifier import TIER_LONG_FORM, classification_tier
from outliers.config import AnalysisConfig
from outliers.duration import duration_seconds
from outliers.errors import AnalysisError
from outliers.ingest import records_from_raw_data
from outliers.serializers import analysis_to_dict


def build_classification_rows(records):
    """One row per video describing how its format was decided."""
    rows = []
    for record in records:
        seconds = duration_seconds(record.duration_raw)
        if record.is_short_form is not None:
            tier = "provided"
            is_short = record.is_short_form
        else:
            tier = classification_tier(seconds, record.title, record.description)
            is_short = tier != TIER_LONG_FORM
        rows.append({
            "id": record.id,
            "title": record.title,
            "videoUrl": record.video_url,
            "durationSeconds": seconds,
            "views": record.view_count,
            "isShort": is_short,
            "tier": tier,
        })
    return rows


def generate_outlier_analysis(raw_data, config=None):
    """Run the full analysis over a raw_data.json payload"""
    config = config or AnalysisConfig.from_env()
    records = records_from_raw_data(raw_data)

    print("\n🔬 YouTube Outlier Analysis")
    print("=" * 50)
    print(f"📼 Videos loaded: {len(records)}")

    result = OutlierPatternAnalyzer(config).analyze_videos(records)
    analysis = analysis_to_dict(result)
    analysis["classification"] = build_classification_rows(records)
    analysis["settings"] = config.to_dict()

    longform = analysis["longform"]
    shorts = analysis["shorts"]
    print("\n✅ Analysis complete!")
    print(f"🎞️ Long-form: {longform['totalVideos']} videos, {longform['outlierCount']} outliers, {len(longform['patterns'])} patterns")
    print(f"🎬 Shorts: {shorts['totalVideos']} videos, {shorts['outlierCount']} outliers, {len(shorts['patterns'])} patterns")
    print(f"🔀 Cross-format insights: {len(analysis['combined']['crossFormatInsights'])}")
    print(f"🧠 Strategy insights: {len(analysis['combined']['enhancedCombinedInsights'])}")

    return analysis


def main():
    """Main execution function"""
    if len(sys.argv) < 2 or len(sys.argv) > 3:
        print("❌ Error: Missing data file path")
        print("\nUsage:")
        print("  python3 youtube_outlier_analysis.py path/to/raw_data.json [output.json]")
        sys.exit(1)

    data_path = Path(sys.argv[1])
    output_file = Path(sys.argv[2]) if len(sys.argv) == 3 else data_path.parent / 'outlier_analysis.json'

    if not data_path.exists():
        print(f"❌ Error: File not found: {data_path}")
        sys.exit(1)

    try:
        config = AnalysisConfig.from_env()
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

        print(f"📂 Loading data from: {data_path}")
        with open(data_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        analysis_results = generate_outlier_analysis(data, config)

        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(analysis_results, f, indent=2, ensure_ascii=False)

        print(f"\n📁 Analysis saved to: {output_file}")
        print("\nNext step:")
        print(f"  python3 tools/export_to_excel.py {data_path} {output_file}")

    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON file: {e}")
        sys.exit(1)
    except AnalysisError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
