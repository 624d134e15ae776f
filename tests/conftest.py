import pytest

SAMPLE_DATASET = """\
# sample faces
FACE alice.jpg
23.0 15.0 11.0 6.5 5.0 4.5

FACE bob.jpg
25.5 16.2 12.1 6.8 5.6 5.2
"""

@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "faces.txt"
    path.write_text(SAMPLE_DATASET, encoding="utf-8")
    return path
