#!/usr/bin/env python3
"""
Flask Web Application for Wperf Analyzer
Provides a REST API that turns uploaded wperf JSON files into pivot tables.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import os
import shutil
import tempfile
from wperf_analyzer import WperfAnalyzer
from wperf_analyzer.core.types import WPERF_PRESET_METRICS
from wperf_analyzer.web import prepare_results

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()

ALLOWED_EXTENSIONS = {'json'}


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze wperf files.
    Accepts: multipart/form-data with fields:
      - 'file': one or more wperf JSON files (count or timeline)
      - 'pad_group_tables': 'true'|'false' (optional, default: 'true')
      - 'include_telemetry': 'true'|'false' (optional, default: 'true')
      - 'include_rows': 'true'|'false' (optional, default: 'true')
      - 'telemetry_preset': unit label, repeatable (optional, default: wperf presets)
    Returns: JSON with summary and tables
    """
    files = request.files.getlist('file')
    if not files:
        return jsonify({'error': 'No file provided'}), 400

    for file in files:
        if not file.filename:
            return jsonify({'error': 'No file selected'}), 400
        if not allowed_file(file.filename):
            return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400

    pad_group_tables = request.form.get('pad_group_tables', 'true').lower() == 'true'
    include_telemetry = request.form.get('include_telemetry', 'true').lower() == 'true'
    include_rows = request.form.get('include_rows', 'true').lower() == 'true'
    telemetry_presets = tuple(request.form.getlist('telemetry_preset')) or WPERF_PRESET_METRICS

    upload_dir = tempfile.mkdtemp(dir=app.config['UPLOAD_FOLDER'])
    try:
        filepaths = []
        for index, file in enumerate(files):
            # Prefix keeps same-named uploads apart and preserves upload order
            filename = f"{index:04d}_{secure_filename(file.filename)}"
            filepath = os.path.join(upload_dir, filename)
            file.save(filepath)
            filepaths.append(filepath)

        analyzer = WperfAnalyzer(
            pad_group_tables=pad_group_tables,
            include_telemetry=include_telemetry,
            telemetry_presets=telemetry_presets
        )
        analyzer.process_files(filepaths)

        if not analyzer.timeline_files and not analyzer.count_files:
            return jsonify({'error': 'None of the uploaded files is a supported wperf JSON file.'}), 422

        results = prepare_results(analyzer, include_rows=include_rows)
        return jsonify(results)

    except Exception as e:
        return jsonify({'error': str(e)}), 500
    finally:
        shutil.rmtree(upload_dir, ignore_errors=True)


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
