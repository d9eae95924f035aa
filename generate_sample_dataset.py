"""
Sample Dataset Generator for the Résumé Role Matcher
This script writes a starter reference dataset of job roles, skills and frameworks
"""

import os
import sys

import pandas as pd

from catalog import FRAMEWORKS_COLUMN, ROLE_COLUMN, SKILLS_COLUMN

SAMPLE_ROLES = [
    ("Backend Developer", "Python, Java, SQL", "Django, Spring, Flask"),
    ("Frontend Developer", "JavaScript, TypeScript, HTML, CSS", "React, Angular, Vue"),
    ("Full Stack Developer", "JavaScript, Python, SQL", "React, Node.js, Django"),
    ("Data Scientist", "Python, R, SQL", "Pandas, TensorFlow, Scikit-learn"),
    ("Mobile Developer", "Kotlin, Swift, Dart", "Flutter, React Native"),
    ("DevOps Engineer", "Bash, Python, YAML", "Docker, Kubernetes, Terraform"),
]


def create_sample_dataset(path):
    """Write the sample roles to ``path`` (.xlsx or .csv)"""
    frame = pd.DataFrame(SAMPLE_ROLES, columns=[ROLE_COLUMN, SKILLS_COLUMN, FRAMEWORKS_COLUMN])

    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    if path.lower().endswith('.csv'):
        frame.to_csv(path, index=False)
    else:
        frame.to_excel(path, index=False)

    print(f"Created dataset: {path} ({len(frame)} job roles)")
    return path


def main(argv=None):
    """Generate the dataset at the given path or the default location"""
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else os.getenv('JOB_ROLES_DATASET', 'jobrolespskillsframeworks.xlsx')

    if os.path.exists(path):
        print(f"⚠️ {path} already exists, not overwriting")
        return 1

    create_sample_dataset(path)
    print("✅ Sample dataset generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
