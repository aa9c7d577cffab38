from pathlib import Path
import pytest
import yaml

CHAIN = {
    "nodes": [
        {"id": "supplier-1", "role": "Supplier", "status": "active"},
        {"id": "factory-1", "role": "Manufacturer", "status": "processing", "assignedUserId": 7},
        {"id": "dist-1", "role": "Distributor", "status": "in_transit"},
        {"id": "store-1", "role": "Customer", "status": "pending"},
        {"id": "idle-1", "role": "Unassigned"},
    ],
    "edges": [
        {"id": "e1", "source": "supplier-1", "target": "factory-1", "label": "steel"},
        {"id": "e2", "source": "factory-1", "target": "dist-1", "label": "widgets"},
        {"id": "e3", "source": "dist-1", "target": "store-1"},
        {"id": "e4", "source": "supplier-1", "target": "dist-1", "label": "spares"},
    ],
}

@pytest.fixture
def chain_data():
    return yaml.safe_load(yaml.safe_dump(CHAIN))

@pytest.fixture
def chain_file(tmp_path: Path, chain_data) -> Path:
    path = tmp_path / "chain.yaml"
    path.write_text(yaml.safe_dump(chain_data, sort_keys=False))
    return path
