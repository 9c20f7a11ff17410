import json
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--save-to-json",
        action="store",
        nargs="?",
        const="scripts_json",
        help="Save lock/unlock scripts to JSON files in the specified directory",
    )


@pytest.fixture
def save_to_json_folder(request):
    return request.config.getoption("--save-to-json")


@pytest.fixture
def save_scripts(save_to_json_folder):
    def save(lock, unlock, area, filename, test_name):
        if not save_to_json_folder:
            return

        output_dir = Path("data") / save_to_json_folder / area
        output_dir.mkdir(parents=True, exist_ok=True)
        json_file = output_dir / f"{filename}.json"

        data = {}
        if json_file.exists():
            with json_file.open("r") as f:
                data = json.load(f)

        data.setdefault(test_name, []).append({"lock": lock, "unlock": unlock})

        with json_file.open("w") as f:
            json.dump(data, f, indent=4)

    return save
