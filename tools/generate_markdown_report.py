#!/usr/bin/env python3
"""
Markdown Report Generator
Generates the outlier and content pattern report in markdown format

Usage:
    python3 generate_markdown_report.py path/to/raw_data.json path/to/outlier_analysis.json
"""

import sys
import json
from collections import Counter
from pathlib import Path
from datetime import datetime

from outliers.recommendations import format_views

FORMAT_SECTIONS = (
    ("longform", "🎞️ Long-form", "long-form"),
    ("shorts", "🎬 Shorts", "Shorts"),
)


def escape_cell(text):
    return str(text).replace("|", "\\|").replace("\n", " ")


class MarkdownReportGenerator:
    def __init__(self, raw_data, analysis):
        """Initialize generator with data"""
        self.channel = raw_data.get('channel', {})
        self.videos = raw_data['videos']
        self.analysis = analysis

    def generate_header(self):
        """Generate report header"""
        date_str = datetime.now().strftime('%B %d, %Y')

        return f"""# YouTube Outlier & Content Pattern Report
**Channel:** {self.channel.get('title', 'Unknown channel')}
**Date:** {date_str}
**Videos Analyzed:** {self.analysis.get('combined', {}).get('totalVideos', len(self.videos))}

---

"""

    def generate_executive_summary(self):
        """Generate executive summary section"""
        longform = self.analysis.get("longform", {})
        shorts = self.analysis.get("shorts", {})
        threshold = self.analysis.get("settings", {}).get("OUTLIER_THRESHOLD", 2.0)

        text = f"""## Executive Summary

An outlier is a video with at least **{threshold}x** the average views of its format.

| Format | Videos | Average Views | Outliers | Patterns |
|---|---|---|---|---|
| Long-form | {longform.get('totalVideos', 0)} | {format_views(longform.get('averageViews', 0))} | {longform.get('outlierCount', 0)} | {len(longform.get('patterns', []))} |
| Shorts | {shorts.get('totalVideos', 0)} | {format_views(shorts.get('averageViews', 0))} | {shorts.get('outlierCount', 0)} | {len(shorts.get('patterns', []))} |

---

"""
        return text

    def generate_outliers_table(self, format_analysis):
        outliers = format_analysis.get("outliers", [])
        if not outliers:
            return "_No videos reached the outlier threshold._\n\n"

        text = "| # | Video | Views | Multiplier | Patterns |\n|---|---|---|---|---|\n"
        for i, outlier in enumerate(outliers, 1):
            tags = ", ".join(f"`{tag}`" for tag in outlier.get("patternTags", [])) or "-"
            text += (
                f"| {i} | [{escape_cell(outlier.get('title', ''))}]({outlier.get('videoUrl', '')}) "
                f"| {format_views(outlier.get('viewCount', 0))} | {outlier.get('multiplier', 0)}x | {tags} |\n"
            )
        return text + "\n"

    def generate_patterns_section(self, format_analysis):
        patterns = format_analysis.get("patterns", [])
        if not patterns:
            return "_No title pattern appears in two or more outliers yet._\n\n"

        text = ""
        for insight in patterns:
            text += (
                f"- **{insight.get('description', insight.get('pattern'))}** (`{insight.get('pattern')}`): "
                f"{insight.get('avgMultiplier', 0)}x average across {insight.get('videoCount', 0)} videos\n"
            )
            for example in insight.get("examples", []):
                text += f"  - {example}\n"
        return text + "\n"

    def generate_title_and_specs_section(self, format_analysis):
        titles = format_analysis.get("titleAnalysis", {})
        specs = format_analysis.get("contentSpecs", {})
        length = specs.get("optimalLength", {})
        timing = specs.get("uploadTiming", {})
        series = specs.get("seriesVsStandalone", {})

        text = "\n### Title & Content Specs\n\n"
        text += f"- **Average title length:** {titles.get('avgTitleLength', 0)} characters\n"
        words = titles.get("mostCommonWords", [])
        if words:
            text += "- **Recurring words:** " + ", ".join(
                f"{w.get('word')} ({w.get('count', 0)}x, {format_views(w.get('avgViews', 0))} avg)" for w in words[:5]
            ) + "\n"
        for title_format in titles.get("titleFormats", []):
            text += (
                f"- **{title_format.get('format')}:** {title_format.get('count', 0)} videos, "
                f"{format_views(title_format.get('avgViews', 0))} avg views\n"
            )
        text += f"- **Optimal length:** {length.get('range', 'Insufficient data')} - {length.get('description', '')}\n"
        best_days = ", ".join(timing.get("bestDays", [])) or "-"
        text += f"- **Best upload days:** {best_days} ({timing.get('insight', '')})\n"
        text += f"- **Series vs standalone:** {series.get('recommendation', '')}\n"
        return text

    def generate_format_section(self, key, heading, label):
        """Generate the detailed section for one format"""
        format_analysis = self.analysis.get(key, {})

        text = f"## {heading}\n\n"
        text += f"**Videos:** {format_analysis.get('totalVideos', 0)}  \n"
        text += f"**Average Views:** {format_views(format_analysis.get('averageViews', 0))}\n\n"

        text += f"### Top {label} Outliers\n\n"
        text += self.generate_outliers_table(format_analysis)

        text += "### Winning Title Patterns\n\n"
        text += self.generate_patterns_section(format_analysis)

        text += "### Recommendations\n\n"
        for i, rec in enumerate(format_analysis.get("recommendations", []), 1):
            text += f"{i}. {rec}\n"

        text += self.generate_title_and_specs_section(format_analysis)

        topics = format_analysis.get("bestPerformingTopics", [])
        if topics:
            text += "\n### Best-Performing Topics\n\n"
            for topic in topics:
                text += f"- **{topic.get('topic')}**: {format_views(topic.get('avgViews', 0))} avg views ({topic.get('count', 0)} videos)\n"

        text += "\n---\n\n"
        return text

    def generate_cross_format_section(self):
        insights = self.analysis.get("combined", {}).get("crossFormatInsights", [])

        text = "## 🔀 Cross-Format Insights\n\n"
        if not insights:
            text += "_No cross-format signal in this batch._\n"
        for insight in insights:
            text += f"- {insight}\n"
        return text + "\n---\n\n"

    def generate_strategy_section(self):
        insights = self.analysis.get("combined", {}).get("enhancedCombinedInsights", [])
        if not insights:
            return ""

        text = "## 🧠 Channel Strategy Insights\n\n"
        for insight in insights:
            text += f"- {insight}\n"
        return text + "\n---\n\n"

    def generate_classification_section(self):
        """Summarize how each video's format was decided"""
        rows = self.analysis.get("classification", [])
        if not rows:
            return ""

        tiers = Counter(row.get("tier", "unknown") for row in rows)
        text = "## 🧭 Format Classification\n\n"
        text += "Shorts rule: <=60s, or 61-180s with a Shorts hashtag, format cue or vertical-format hint.\n\n"
        text += "| Decided by | Videos |\n|---|---|\n"
        for tier, count in tiers.most_common():
            text += f"| {tier} | {count} |\n"
        return text + "\n"

    def generate(self):
        """Generate complete markdown report"""
        print("📝 Generating markdown report...")

        report = self.generate_header()
        report += self.generate_executive_summary()
        for key, heading, label in FORMAT_SECTIONS:
            report += self.generate_format_section(key, heading, label)
        report += self.generate_cross_format_section()
        report += self.generate_strategy_section()
        report += self.generate_classification_section()

        print("✅ Report generated successfully!")

        return report


def main():
    """Main execution function"""
    if len(sys.argv) != 3:
        print("❌ Error: Missing required files")
        print("\nUsage:")
        print("  python3 generate_markdown_report.py path/to/raw_data.json path/to/outlier_analysis.json")
        sys.exit(1)

    raw_data_file = sys.argv[1]
    analysis_file = sys.argv[2]

    try:
        print("📂 Loading data files...")
        with open(raw_data_file, 'r', encoding='utf-8') as f:
            raw_data = json.load(f)
        with open(analysis_file, 'r', encoding='utf-8') as f:
            analysis = json.load(f)

        print("\n🚀 Generating Markdown Report")
        print("=" * 50)

        generator = MarkdownReportGenerator(raw_data, analysis)
        report = generator.generate()

        output_path = Path(analysis_file).parent / 'outlier_report.md'
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(report)

        print("\n" + "=" * 50)
        print("✅ SUCCESS!")
        print(f"📁 Report saved to: {output_path}")
        print("\n📄 Report Preview:")
        print("=" * 50)
        print(report[:1000] + "\n\n... (truncated for display)\n")

    except FileNotFoundError as e:
        print(f"❌ Error: File not found: {e}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON file: {e}")
        sys.exit(1)
    except KeyError as e:
        print(f"❌ Error: Missing field in input data: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
