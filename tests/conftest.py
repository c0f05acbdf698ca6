# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from linesheet.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _clean_logging():
    # handlers bind sys.stdout at setup; capsys swaps it per test
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def client_csv() -> str:
    return (
        "Name,Balance,Min Order Quantity,Sample Lead Time,Bulk Lead Time,Status,Sizes,Fabric Material,Category,Image URL\n"
        "Linen Shirt,120.50,50,2 weeks,6 weeks,In Production,S-XL,Linen,Tops,https://img/1.jpg\n"
        "Denim Jeans,0,100,3 weeks,,Sampling,28-36,Denim,Bottoms,\n"
        "Silk Blouse,abc,25,1 week,4 weeks,Sampling,XS-L,Silk,Tops,\n"
    )


@pytest.fixture()
def internal_csv() -> str:
    return (
        "name,minOrderQuantity,sampleCost,productionCost,factoryCost,shipping,sampleLeadTime,bulkLeadTime,status,note,sizes,fabricMaterial,category,imageUrl,alibabaUrl\n"
        "Linen Shirt,50,30,25,20,Air,2 weeks,6 weeks,In Production,rush,S-XL,Linen,Tops,,https://alibaba.example/1\n"
        "Denim Jeans,100,40,15,0,Sea,3 weeks,,Sampling,,28-36,Denim,Bottoms,,\n"
    )


def _make_csv(category_counts: dict[str, int], extra_header: str = "") -> str:
    """Build a client CSV with ``count`` rows per category, named Item 1..N."""
    lines = ["name,category" + extra_header]
    n = 0
    for category, count in category_counts.items():
        for _ in range(count):
            n += 1
            lines.append(f"Item {n},{category}")
    return "\n".join(lines) + "\n"


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "sheet.csv") -> Path:
        p = temp_workdir / "data" / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture()
def make_csv():
    return _make_csv
