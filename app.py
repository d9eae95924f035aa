from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge
import logging
import os
from dotenv import load_dotenv

from catalog import ReferenceCatalog
from errors import ResumeMatcherError
from ingest import SubmissionHandler

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Flask application setup
app = Flask(__name__)
CORS(app)

# Vercel only allows writes under /tmp
ON_VERCEL = bool(os.environ.get('VERCEL'))
DEFAULT_UPLOAD_FOLDER = '/tmp/uploads' if ON_VERCEL else os.path.join(BASE_DIR, 'uploads')
DEFAULT_LOG_PATH = '/tmp/userdata.xlsx' if ON_VERCEL else os.path.join(BASE_DIR, 'userdata.xlsx')

app.config['DATASET_PATH'] = os.getenv(
    'JOB_ROLES_DATASET', os.path.join(BASE_DIR, 'jobrolespskillsframeworks.xlsx'))
app.config['SUBMISSION_LOG_PATH'] = os.getenv('SUBMISSION_LOG_PATH', DEFAULT_LOG_PATH)
app.config['UPLOAD_FOLDER'] = os.getenv('UPLOAD_FOLDER', DEFAULT_UPLOAD_FOLDER)
app.config['MAX_CONTENT_LENGTH'] = int(os.getenv('MAX_UPLOAD_MB', '16')) * 1024 * 1024


def get_submission_handler():
    """Build a handler from the current app configuration."""
    return SubmissionHandler(
        dataset_path=app.config['DATASET_PATH'],
        log_path=app.config['SUBMISSION_LOG_PATH'],
        upload_folder=app.config['UPLOAD_FOLDER'],
    )


@app.route('/')
def index():
    return 'Hello, world!'


@app.route('/roles')
def list_roles():
    """Job roles available in the reference dataset"""
    try:
        catalog = ReferenceCatalog.from_file(app.config['DATASET_PATH'])
    except ResumeMatcherError:
        logger.exception("Error loading job roles")
        return jsonify({'error': 'Error loading job roles'}), 500

    return jsonify({'roles': catalog.roles})


@app.route('/upload', methods=['POST'])
def upload_resume():
    """Match an uploaded résumé against the selected job role"""
    upload = request.files.get('resume')
    logger.info("File received: %s", upload.filename if upload else None)

    try:
        response = get_submission_handler().handle(upload, request.form)
    except ResumeMatcherError as e:
        return jsonify({'error': e.message}), e.status_code

    return jsonify(response)


@app.errorhandler(RequestEntityTooLarge)
def file_too_large(error):
    return jsonify({'error': 'File too large'}), 413


@app.errorhandler(500)
def internal_error(error):
    logger.error("Unhandled error: %s", getattr(error, 'original_exception', error))
    return 'Something went wrong!', 500


if __name__ == '__main__':
    # For local development
    port = int(os.getenv('PORT', '3000'))
    logger.info("✅ Server is running at http://localhost:%d", port)
    app.run(debug=bool(os.getenv('FLASK_DEBUG')), host='0.0.0.0', port=port)
