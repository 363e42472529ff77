"""
pytest 공통 fixture 정의

설정 파일 및 임시 디렉토리 fixture
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (local 환경)"""
    settings_content = """# 테스트용 settings.yaml
environment: local
api_key: "test_api_key_abcde"
timeout_sec: 5

networks:
  nile: https://nile.example.com/

fees:
  activation_fee_trx: "1.1"
  unknown_contract_energy: 150000
  simulation_fallback_energy: 120000
  bandwidth_price_sun: 1000
  energy_price_sun: 210
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_production(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (production, 최소 설정)"""
    settings_content = """environment: production
"""
    settings_path = temp_dir / "settings_prod.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_env(temp_dir: Path) -> Path:
    """잘못된 environment의 settings.yaml 파일 생성"""
    settings_content = """environment: staging
"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path
