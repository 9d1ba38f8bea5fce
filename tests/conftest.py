import os

# app.main builds the application at import time and fails fast without these
os.environ.setdefault("FIREBASE_URL", "https://sat-test.firebaseio.com/sensors")
os.environ.setdefault("FIREBASE_SECRET", "test-secret")
os.environ.setdefault("PINATA_JWT", "test-jwt")
os.environ.setdefault("NFT_CONTRACT_ADDRESS", "0x00000000000000000000000000000000000000c0")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings():
    return Settings(
        firebase_url="https://sat-test.firebaseio.com/sensors",
        firebase_secret="test-secret",
        pinata_jwt="test-jwt",
        nft_contract_address="0x00000000000000000000000000000000000000c0",
        pinata_api_url="https://pinata.test",
    )

@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c

@pytest.fixture
def record_a():
    return {"timestamp": "2024-01-01T00:00:00Z", "temperature": 20, "humidity": 50, "light": 100, "air_quality": 5}

@pytest.fixture
def record_b():
    return {"timestamp": "2024-06-01T00:00:00Z", "temperature": 25, "humidity": 40, "light": 200, "air_quality": 8}

@pytest.fixture
def urls():
    return {
        "firebase": "https://sat-test.firebaseio.com/sensors.json",
        "pin": "https://pinata.test/pinning/pinFileToIPFS",
        "pin_auth": "https://pinata.test/data/testAuthentication",
    }
