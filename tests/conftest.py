"""Shared fixtures for catalog build tests."""

import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from models import BuildIssues

PLACEHOLDER = "/thumbs/_placeholder.webp"


@pytest.fixture
def issues():
    return BuildIssues()


@pytest.fixture
def placeholder():
    return PLACEHOLDER


@pytest.fixture
def catalog_rows():
    return [
        {"Name": "Bags", "RelativePath": "bags", "Drive Link": "", "Thumbs Path": "", "TopOrder": "2"},
        {"Name": "Tote", "RelativePath": "bags/Tote", "Drive Link": "", "Thumbs Path": ""},
        {
            "Name": "Mini",
            "RelativePath": "bags/Tote/Mini",
            "Drive Link": "https://drive.google.com/mini",
            "Thumbs Path": "bags/mini.webp",
        },
        {
            "Name": "Maxi",
            "RelativePath": "bags/Tote/Maxi",
            "Drive Link": "https://drive.google.com/maxi",
            "Thumbs Path": "",
        },
        {
            "Name": "Clutch",
            "RelativePath": "bags/Clutch",
            "Drive Link": "https://drive.google.com/clutch",
            "Thumbs Path": "thumbs/bags/clutch.webp",
        },
        {"Name": "Shoes", "RelativePath": "shoes", "Drive Link": "", "Thumbs Path": "shoes.webp", "TopOrder": "1"},
        {
            "Name": "Heels",
            "RelativePath": "shoes/Heels",
            "Drive Link": "https://drive.google.com/heels",
            "Thumbs Path": "",
        },
    ]


@pytest.fixture
def brand_rows():
    return [
        {
            "csvslug": "acme",
            "brandName": "Acme",
            "primaryColor": "#112233",
            "accentColor": "#AABBCC",
            "textColor": "",
            "bgColor": "",
            "whatsapp": "https://wa.me/15551234567",
            "defaultCategory": "SHOES",
        },
        {"csvslug": "noir", "brandName": "Noir"},
    ]
