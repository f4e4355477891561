import os
import sys
import shutil
import subprocess
from pathlib import Path

from outliers.config import AnalysisConfig
from outliers.errors import ConfigError


def run_step(command, step_name):
    print(f"\n🚀 Running Step: {step_name}...")
    try:
        process = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)

        full_output = ""
        for line in process.stdout:
            print(line, end="")
            full_output += line

        process.wait()

        if process.returncode != 0:
            print(f"❌ Error in {step_name}")
            return False, full_output

        return True, full_output
    except OSError as e:
        print(f"❌ Exception in {step_name}: {e}")
        return False, str(e)


def resolve_raw_data(argument, output_folder):
    """Accept a raw_data.json path or a channel id fetched into the output folder."""
    path = Path(argument)
    if path.is_file():
        return path
    return Path(output_folder) / argument / "raw_data.json"


def copy_to_reports(source, target, label):
    if not source.exists():
        return
    try:
        shutil.copy(source, target)
        print(f"✨ Final {label} copied to: {target}")
    except OSError as e:
        print(f"⚠️ Could not copy {label} to reports/ archive: {e}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python3 main.py <path/to/raw_data.json | channel_id>")
        sys.exit(1)

    try:
        config = AnalysisConfig.from_env()
    except ConfigError as e:
        print(f"❌ Invalid configuration: {e}")
        sys.exit(1)

    raw_data_path = resolve_raw_data(sys.argv[1], config.output_folder)
    if not raw_data_path.exists():
        print(f"❌ Raw data file not found: {raw_data_path}")
        sys.exit(1)

    os.makedirs("reports", exist_ok=True)

    # raw_data.json lives in a folder named after the channel id
    channel_id = raw_data_path.parent.name or "channel"
    analysis_path = raw_data_path.parent / "outlier_analysis.json"
    python = sys.executable

    # Step 1: Analyze
    success, _ = run_step(
        [python, "-m", "tools.youtube_outlier_analysis", str(raw_data_path), str(analysis_path)],
        "Analyzing Outliers",
    )
    if not success:
        sys.exit(1)

    # Step 2: Export to Excel
    success, _ = run_step(
        [python, "-m", "tools.export_to_excel", str(raw_data_path), str(analysis_path)],
        "Exporting to Excel",
    )
    if not success:
        print("⚠️ Excel export failed, proceeding to Markdown report.")

    # Step 3: Generate Markdown Report
    run_step(
        [python, "-m", "tools.generate_markdown_report", str(raw_data_path), str(analysis_path)],
        "Generating Markdown Report",
    )

    # Step 4: Copy outputs to reports directory
    print()
    copy_to_reports(raw_data_path.parent / "outlier_report.md", Path("reports") / f"{channel_id}_outliers.md", "report")
    copy_to_reports(raw_data_path.parent / "outlier_report.xlsx", Path("reports") / f"{channel_id}_outliers.xlsx", "Excel workbook")

    print("\n✅ Outlier Analysis Pipeline Complete!")


if __name__ == "__main__":
    main()
