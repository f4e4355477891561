#!/usr/bin/env python3
"""
Excel Exporter
Creates a multi-tab Excel workbook from outlier analysis data.

Usage:
    python3 export_to_excel.py path/to/raw_data.json path/to/outlier_analysis.json [output.xlsx]
"""

import json
import sys
from datetime import datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter


TITLE_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
HEADER_FILL = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
SECTION_FILL = PatternFill(start_color="EEF3F8", end_color="EEF3F8", fill_type="solid")

FORMAT_LABELS = (("longform", "Long-form"), ("shorts", "Shorts"))


def autosize_columns(worksheet, max_width=80):
    """Auto-size columns to content width with a reasonable cap."""
    widths = {}
    for row in worksheet.iter_rows():
        for cell in row:
            if cell.value is None:
                continue
            widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))

    for col_idx, width in widths.items():
        worksheet.column_dimensions[get_column_letter(col_idx)].width = min(max(width + 2, 10), max_width)


def style_title_row(worksheet, end_column):
    """Style and merge row 1 as title."""
    worksheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=end_column)
    cell = worksheet.cell(row=1, column=1)
    cell.fill = TITLE_FILL
    cell.font = Font(bold=True, color="FFFFFF", size=13)
    cell.alignment = Alignment(horizontal="center", vertical="center")


def style_header_row(worksheet, row_idx, end_column):
    for col in range(1, end_column + 1):
        cell = worksheet.cell(row=row_idx, column=col)
        cell.fill = HEADER_FILL
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)


def style_section_row(worksheet, row_idx, end_column):
    for col in range(1, end_column + 1):
        cell = worksheet.cell(row=row_idx, column=col)
        cell.fill = SECTION_FILL
        cell.font = Font(bold=True)


class ExcelExporter:
    def __init__(self, raw_data, analysis):
        self.raw_data = raw_data
        self.analysis = analysis
        self.channel = raw_data.get("channel", {})
        self.videos = raw_data["videos"]

    def create_summary_tab(self, workbook):
        ws = workbook.create_sheet("Summary")
        settings = self.analysis.get("settings", {})
        combined = self.analysis.get("combined", {})

        rows = [
            ["YOUTUBE OUTLIER ANALYSIS - SUMMARY"],
            [""],
            ["Channel Information", ""],
            ["Channel Name", self.channel.get("title", "")],
            ["Videos Analyzed", combined.get("totalVideos", len(self.videos))],
            ["Outlier Threshold", f"{settings.get('OUTLIER_THRESHOLD', 2.0)}x format average"],
            [""],
        ]
        section_rows = [3]

        for key, label in FORMAT_LABELS:
            format_analysis = self.analysis.get(key, {})
            section_rows.append(len(rows) + 1)
            rows.extend([
                [label, ""],
                ["Videos", format_analysis.get("totalVideos", 0)],
                ["Average Views", format_analysis.get("averageViews", 0)],
                ["Outliers", format_analysis.get("outlierCount", 0)],
                ["Ranked Patterns", len(format_analysis.get("patterns", []))],
                [""],
            ])

        section_rows.append(len(rows) + 1)
        rows.append(["Cross-Format Insights", ""])
        for idx, insight in enumerate(combined.get("crossFormatInsights", []), 1):
            rows.append([f"{idx}.", insight])

        for row in rows:
            ws.append(row)

        style_title_row(ws, 2)
        for row_idx in section_rows:
            style_section_row(ws, row_idx, 2)
        ws.freeze_panes = "A4"
        autosize_columns(ws)

    def create_outliers_tab(self, workbook, key, label):
        ws = workbook.create_sheet(f"{label} Outliers")
        headers = ["Rank", "Video URL", "Title", "Views", "Multiplier", "Published Date", "Pattern Tags"]
        ws.append([f"{label.upper()} OUTLIERS"])
        ws.append([""])
        ws.append(headers)

        for idx, outlier in enumerate(self.analysis.get(key, {}).get("outliers", []), 1):
            ws.append([
                idx,
                outlier.get("videoUrl", ""),
                outlier.get("title", ""),
                outlier.get("viewCount", 0),
                outlier.get("multiplier", 0),
                (outlier.get("publishedAt") or "")[:10],
                ", ".join(outlier.get("patternTags", [])),
            ])

        style_title_row(ws, len(headers))
        style_header_row(ws, 3, len(headers))
        ws.freeze_panes = "A4"
        autosize_columns(ws, max_width=70)

    def create_patterns_tab(self, workbook):
        ws = workbook.create_sheet("Patterns")
        headers = ["Format", "Pattern", "Description", "Videos", "Avg Multiplier", "Avg Views", "Examples"]
        ws.append(["WINNING TITLE PATTERNS"])
        ws.append([""])
        ws.append(headers)

        for key, label in FORMAT_LABELS:
            for insight in self.analysis.get(key, {}).get("patterns", []):
                ws.append([
                    label,
                    insight.get("pattern", ""),
                    insight.get("description", ""),
                    insight.get("videoCount", 0),
                    insight.get("avgMultiplier", 0),
                    insight.get("avgViews", 0),
                    " | ".join(insight.get("examples", [])),
                ])

        style_title_row(ws, len(headers))
        style_header_row(ws, 3, len(headers))
        ws.freeze_panes = "A4"
        autosize_columns(ws, max_width=70)

    def create_content_specs_tab(self, workbook):
        ws = workbook.create_sheet("Content Specs")
        ws.append(["TITLE & CONTENT SPECS"])
        ws.append([""])
        ws.append(["Format", "Metric", "Value"])

        for key, label in FORMAT_LABELS:
            format_analysis = self.analysis.get(key, {})
            titles = format_analysis.get("titleAnalysis", {})
            specs = format_analysis.get("contentSpecs", {})
            length = specs.get("optimalLength", {})
            timing = specs.get("uploadTiming", {})
            series = specs.get("seriesVsStandalone", {})

            ws.append([label, "Average Title Length", titles.get("avgTitleLength", 0)])
            for word in titles.get("mostCommonWords", []):
                ws.append([label, f"Word: {word.get('word')}", f"{word.get('count', 0)}x, {word.get('avgViews', 0)} avg views"])
            for title_format in titles.get("titleFormats", []):
                ws.append([label, f"Title Format: {title_format.get('format')}", f"{title_format.get('count', 0)} videos, {title_format.get('avgViews', 0)} avg views"])
            ws.append([label, "Optimal Length", f"{length.get('range', '')} ({length.get('avgViews', 0)} avg views)"])
            ws.append([label, "Best Upload Days", ", ".join(timing.get("bestDays", []))])
            ws.append([label, "Worst Upload Days", ", ".join(timing.get("worstDays", []))])
            ws.append([label, "Upload Timing", timing.get("insight", "")])
            ws.append([label, "Series vs Standalone", series.get("recommendation", "")])

        style_title_row(ws, 3)
        style_header_row(ws, 3, 3)
        ws.freeze_panes = "A4"
        autosize_columns(ws, max_width=100)

    def create_recommendations_tab(self, workbook):
        ws = workbook.create_sheet("Recommendations")
        ws.append(["RECOMMENDATIONS"])
        ws.append([""])
        ws.append(["Format", "#", "Recommendation"])

        for key, label in FORMAT_LABELS:
            for idx, rec in enumerate(self.analysis.get(key, {}).get("recommendations", []), 1):
                ws.append([label, idx, rec])
        for idx, insight in enumerate(self.analysis.get("combined", {}).get("crossFormatInsights", []), 1):
            ws.append(["Cross-format", idx, insight])
        for idx, insight in enumerate(self.analysis.get("combined", {}).get("enhancedCombinedInsights", []), 1):
            ws.append(["Strategy", idx, insight])

        style_title_row(ws, 3)
        style_header_row(ws, 3, 3)
        ws.freeze_panes = "A4"
        autosize_columns(ws, max_width=100)

    def create_classification_tab(self, workbook):
        ws = workbook.create_sheet("Video Classification")
        headers = ["Video URL", "Title", "Duration (s)", "Views", "Format", "Decided By"]
        ws.append(headers)

        for row in self.analysis.get("classification", []):
            ws.append([
                row.get("videoUrl", ""),
                row.get("title", ""),
                row.get("durationSeconds", 0),
                row.get("views", 0),
                "Shorts" if row.get("isShort") else "Long-form",
                row.get("tier", ""),
            ])

        style_header_row(ws, 1, len(headers))
        ws.freeze_panes = "A2"
        autosize_columns(ws, max_width=70)

    def export(self, output_path):
        workbook = Workbook()
        default_sheet = workbook.active
        workbook.remove(default_sheet)

        self.create_summary_tab(workbook)
        for key, label in FORMAT_LABELS:
            self.create_outliers_tab(workbook, key, label)
        self.create_patterns_tab(workbook)
        self.create_content_specs_tab(workbook)
        self.create_recommendations_tab(workbook)
        self.create_classification_tab(workbook)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output_path)
        return output_path


def main():
    if len(sys.argv) < 3 or len(sys.argv) > 4:
        print("Error: Missing required files")
        print("\nUsage:")
        print("  python3 export_to_excel.py path/to/raw_data.json path/to/outlier_analysis.json [output.xlsx]")
        sys.exit(1)

    raw_data_file = Path(sys.argv[1])
    analysis_file = Path(sys.argv[2])
    output_file = Path(sys.argv[3]) if len(sys.argv) == 4 else analysis_file.parent / "outlier_report.xlsx"

    try:
        print("Loading data files...")
        with raw_data_file.open("r", encoding="utf-8") as f:
            raw_data = json.load(f)
        with analysis_file.open("r", encoding="utf-8") as f:
            analysis = json.load(f)

        print("Exporting to Excel workbook...")
        print("=" * 50)

        exporter = ExcelExporter(raw_data, analysis)
        saved_path = exporter.export(output_file)

        print("\n" + "=" * 50)
        print("SUCCESS")
        print(f"\nExcel file saved at:\n{saved_path}")
        print(f"\nGenerated at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    except FileNotFoundError as exc:
        print(f"Error: File not found: {exc}")
        sys.exit(1)
    except json.JSONDecodeError as exc:
        print(f"Error: Invalid JSON file: {exc}")
        sys.exit(1)
    except (KeyError, OSError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
