#!/usr/bin/env python3
"""
Setup check for the Résumé Role Matcher
Verifies the reference dataset, submission log and upload folder before serving
"""

import os
import sys

from dotenv import load_dotenv

from catalog import ReferenceCatalog
from errors import ResumeMatcherError
from submission_log import LOG_COLUMNS, SubmissionLogger


def check_file_exists(filepath, description):
    """Check if a file exists and print status"""
    if os.path.exists(filepath):
        size = os.path.getsize(filepath)
        print(f"✅ {description}: {filepath} ({size} bytes)")
        return True
    else:
        print(f"❌ {description}: {filepath} (NOT FOUND)")
        return False


def validate_dataset(dataset_path):
    """Load the reference dataset and report the job roles it defines"""
    if not check_file_exists(dataset_path, "Reference dataset"):
        return False

    try:
        catalog = ReferenceCatalog.from_file(dataset_path)
    except ResumeMatcherError as e:
        print(f"❌ Dataset invalid: {e}")
        return False

    if not len(catalog):
        print("❌ Dataset defines no job roles")
        return False

    print(f"✅ Dataset valid: {len(catalog)} job roles")
    for role in catalog.roles:
        requirement = catalog.lookup(role)
        if not requirement.required_skills or not requirement.required_frameworks:
            print(f"   ⚠️ {role}: empty skills or frameworks, that half always scores 50")
    return True


def check_submission_log(log_path):
    """An existing log must carry the expected header; a missing one is created on first upload"""
    if not os.path.exists(log_path):
        print(f"ℹ️ Submission log will be created at {log_path}")
        return True

    try:
        frame = SubmissionLogger(log_path).read_all()
    except Exception as e:
        print(f"❌ Submission log unreadable: {e}")
        return False

    print(f"✅ Submission log: {len(frame)} submissions")
    extra = [column for column in frame.columns if column not in LOG_COLUMNS]
    if extra:
        print(f"   ⚠️ Unexpected columns kept as-is: {extra}")
    return True


def check_upload_folder(upload_folder):
    """The upload folder must exist (or be creatable) and be writable"""
    try:
        os.makedirs(upload_folder, exist_ok=True)
    except OSError as e:
        print(f"❌ Upload folder {upload_folder}: {e}")
        return False

    if not os.access(upload_folder, os.W_OK):
        print(f"❌ Upload folder {upload_folder} is not writable")
        return False

    print(f"✅ Upload folder: {upload_folder}")
    return True


def main(config=None):
    """Run all setup checks"""
    if config is None:
        load_dotenv()
        from app import app
        config = app.config

    print("🧪 Résumé Role Matcher - Setup Check")
    print("=" * 50)

    checks = [
        ("Reference Dataset", lambda: validate_dataset(config['DATASET_PATH'])),
        ("Submission Log", lambda: check_submission_log(config['SUBMISSION_LOG_PATH'])),
        ("Upload Folder", lambda: check_upload_folder(config['UPLOAD_FOLDER'])),
    ]

    results = []

    for check_name, check_func in checks:
        print(f"\n🔍 Checking {check_name}:")
        results.append((check_name, check_func()))

    # Summary
    print("\n" + "=" * 50)
    passed = sum(1 for _, result in results if result)
    total = len(results)

    for check_name, result in results:
        status = "✅ PASS" if result else "❌ FAIL"
        print(f"   {status}: {check_name}")

    print(f"\n🎯 Overall: {passed}/{total} checks passed")
    return passed == total


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
