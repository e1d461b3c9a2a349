"""
Result builder for web interface output.
"""

from ..formatters import format_nanoseconds


def prepare_results(analyzer, include_rows: bool = True):
    """
    Convert analyzer results to a structured format for JSON output.

    Args:
        analyzer: WperfAnalyzer instance with a completed run
        include_rows: If False, table descriptors are returned without rows

    Returns:
        Dictionary with structured results for rendering
    """
    info = analyzer.data_source_info
    duration_ns = info.duration_nanoseconds if info else 0

    tables = []
    for table in analyzer.tables:
        table_data = table.to_dict()
        if not include_rows:
            table_data.pop('rows')
        table_data['pivot'] = table.pivot()
        tables.append(table_data)

    return {
        'summary': {
            'timeline_files': len(analyzer.timeline_files),
            'count_files': len(analyzer.count_files),
            'unsupported_files': [error.path for error in analyzer.unsupported_files],
            'failed_files': [str(error) for error in analyzer.failed_files],
            'total_events': analyzer.event_count,
            'cooked_events': {cooker_id: len(items) for cooker_id, items in analyzer.cooked.items()},
            'start_wall_clock': info.start_wall_clock.isoformat() if info and info.start_wall_clock else None,
            'duration_ns': duration_ns,
            'duration_formatted': format_nanoseconds(duration_ns),
            'total_tables': len(tables),
        },
        'tables': tables,
    }
