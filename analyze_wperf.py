#!/usr/bin/env python3
"""
Wperf Analyzer - command line entry point
"""

import json
import sys
from wperf_analyzer import WperfAnalyzer
from wperf_analyzer.core.types import WPERF_PRESET_METRICS
from wperf_analyzer.web import prepare_results


def main():
    import argparse
    parser = argparse.ArgumentParser(
        description='Analyze wperf counting and timeline JSON files and build pivot tables.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_wperf.py count.json
  python analyze_wperf.py timeline-1.json timeline-2.json -o tables.json
  python analyze_wperf.py count.json --no-padding --no-telemetry
  python analyze_wperf.py count.json --telemetry-preset MPKI --telemetry-preset "per cycle"
        """
    )
    parser.add_argument('input_files', nargs='+', help='Paths to wperf JSON files')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                        help='Write the tables as JSON to this file')
    parser.add_argument('--no-padding', action='store_true',
                        help='Do not pad per-category tables with placeholder rows')
    parser.add_argument('--no-telemetry', action='store_true',
                        help='Skip telemetry metrics')
    parser.add_argument('--telemetry-preset', dest='telemetry_presets', action='append',
                        metavar='UNIT',
                        help='Unit that gets its own telemetry table (repeatable; '
                             'replaces the built-in wperf presets)')
    parser.add_argument('--no-rows', action='store_true',
                        help='Only write table descriptors and pivots, not raw rows')
    args = parser.parse_args()

    analyzer = WperfAnalyzer(
        pad_group_tables=not args.no_padding,
        include_telemetry=not args.no_telemetry,
        telemetry_presets=tuple(args.telemetry_presets or WPERF_PRESET_METRICS)
    )

    try:
        print(f"\nConfiguration:")
        print(f"  Input files: {', '.join(args.input_files)}")
        print(f"  Pad group tables: {not args.no_padding}")
        print(f"  Include telemetry: {not args.no_telemetry}\n")
        analyzer.process_files(args.input_files)

        if not analyzer.timeline_files and not analyzer.count_files:
            print("Error: none of the input files is a supported wperf JSON file.")
            sys.exit(1)

        for table in analyzer.tables:
            print(f"  {table.title}: {table.row_count} rows")

        if args.output_file:
            results = prepare_results(analyzer, include_rows=not args.no_rows)
            with open(args.output_file, 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2)
            print(f"\nWrote {args.output_file}")
        print(f"\n✓ Analysis complete!")
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
