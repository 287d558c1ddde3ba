from pathlib import Path

import pytest

SAMPLE_VALUES = [
    "ABCDE1234F",
    "abcde1234f",
    "  ABCDE1234F  ",
    "",
    "XKPLR9382Q",
    "AABCD1234E",
    "xkplr9382q ",
]


@pytest.fixture()
def sample_raw_values() -> list[str | None]:
    """Raw values covering padding, case, blanks, nulls and duplicates."""
    return [*SAMPLE_VALUES, None]


@pytest.fixture()
def sample_csv(tmp_path: Path) -> Path:
    """Write the sample values as a CSV; the final short row has no PAN cell."""
    path = tmp_path / "pan_numbers.csv"
    lines = ["source,pan_number"]
    lines += [f"upload,{value}" for value in SAMPLE_VALUES]
    lines.append("upload")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
