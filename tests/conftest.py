import io

import pandas as pd
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from catalog import FRAMEWORKS_COLUMN, ROLE_COLUMN, SKILLS_COLUMN, ReferenceCatalog

ROLES = [
    ("Backend Developer", "Python, Java", "Django, Spring"),
    ("Data Scientist", "Python, SQL, Scala", "Pandas, TensorFlow"),
    ("Go Developer", "Go", "Gin"),
    ("Shell Scripter", "Bash", ""),
]


def build_pdf(pages):
    """Render a PDF with one list of text lines per page."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 18
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def dataset_path(tmp_path):
    path = tmp_path / "jobrolespskillsframeworks.xlsx"
    frame = pd.DataFrame(ROLES, columns=[ROLE_COLUMN, SKILLS_COLUMN, FRAMEWORKS_COLUMN])
    frame.to_excel(path, index=False)
    return str(path)


@pytest.fixture
def catalog(dataset_path):
    return ReferenceCatalog.from_file(dataset_path)


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "logs" / "userdata.xlsx")


@pytest.fixture
def upload_folder(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def client(monkeypatch, dataset_path, log_path, upload_folder):
    from app import app

    monkeypatch.setitem(app.config, 'TESTING', True)
    monkeypatch.setitem(app.config, 'DATASET_PATH', dataset_path)
    monkeypatch.setitem(app.config, 'SUBMISSION_LOG_PATH', log_path)
    monkeypatch.setitem(app.config, 'UPLOAD_FOLDER', upload_folder)

    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def make_pdf():
    return build_pdf
