"""
FeeComposer 테스트

Bandwidth 전부-아니면-전무, Energy 부분 소비, 활성화 수수료,
TRX 환산 및 6자리 절사, 항목 순서 검증.
"""

import asyncio
from decimal import Decimal

import pytest

from core.constants import ChainParameterKeys, NativeToken
from core.types import FeeKind, Network
from engine.composer import FeeComposer
from engine.errors import ParameterFetchFailed
from engine.models import FeeDefaults


def _units(breakdown) -> list[str]:
    return [entry.unit for entry in breakdown]


class TestBandwidthPolicy:
    """Bandwidth 전부-아니면-전무"""

    @pytest.mark.asyncio
    async def test_sufficient_bandwidth(self, composer, ledger, transfer_tx) -> None:
        """충분하면 정확한 byte 수만큼 소비, TRX 없음"""
        ledger.activate("TReceiver")

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=600
        )

        assert _units(breakdown) == ["BANDWIDTH"]
        assert breakdown.find("BANDWIDTH").amount == Decimal("200")
        assert breakdown.native_total() == Decimal("0")

    @pytest.mark.asyncio
    async def test_exactly_enough_bandwidth(self, composer, ledger, transfer_tx) -> None:
        """available == needed 이면 리소스 소비"""
        ledger.activate("TReceiver")

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=200
        )

        assert _units(breakdown) == ["BANDWIDTH"]

    @pytest.mark.asyncio
    async def test_insufficient_bandwidth_pays_all(self, composer, ledger, transfer_tx) -> None:
        """부족하면 리소스 소비 0, 전체 byte 를 TRX 로 지불"""
        ledger.activate("TReceiver")

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=199
        )

        assert _units(breakdown) == ["TRX"]
        # 200 byte * 1000 SUN / 1_000_000
        assert breakdown.native_total() == Decimal("0.2")


class TestEnergyPolicy:
    """Energy 부분 소비"""

    @pytest.mark.asyncio
    async def test_partial_energy(self, composer, ledger, trigger_tx) -> None:
        """시뮬레이션 130000, 가용 100000 → 소비 100000, 초과 30000"""
        ledger.set_simulation("TContract", energy_used=130_000)

        breakdown = await composer.compute_fee(
            Network.MAINNET, trigger_tx(), available_energy=100_000, available_bandwidth=1_000
        )

        assert _units(breakdown) == ["ENERGY", "BANDWIDTH", "TRX"]
        assert breakdown.find("ENERGY").amount == Decimal("100000")
        assert breakdown.find("BANDWIDTH").amount == Decimal("200")
        # 30000 * 100 SUN / 1_000_000
        assert breakdown.native_total() == Decimal("3")

    @pytest.mark.asyncio
    async def test_no_energy_available(self, composer, ledger, trigger_tx) -> None:
        """가용 Energy 0 → Energy 항목 없음, 전량 TRX"""
        ledger.set_simulation("TContract", energy_used=130_000)

        breakdown = await composer.compute_fee(
            Network.MAINNET, trigger_tx(), available_energy=0, available_bandwidth=0
        )

        assert _units(breakdown) == ["TRX"]
        # energy 13 TRX + bandwidth 0.2 TRX
        assert breakdown.native_total() == Decimal("13.2")

    @pytest.mark.asyncio
    async def test_negative_available_treated_as_zero(self, composer, ledger, trigger_tx) -> None:
        """음수 가용량은 0"""
        ledger.set_simulation("TContract", energy_used=1_000)

        breakdown = await composer.compute_fee(
            Network.MAINNET, trigger_tx(), available_energy=-500, available_bandwidth=1_000
        )

        assert breakdown.find("ENERGY") is None
        assert breakdown.native_total() == Decimal("0.1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("available", [0, 1, 64_284, 64_285, 64_286, 1_000_000])
    async def test_consumed_plus_overage_equals_needed(
        self, composer, ledger, trigger_tx, available: int
    ) -> None:
        """consumed + overage == needed, consumed <= available"""
        ledger.set_simulation("TContract", energy_used=64_285)
        tx = trigger_tx()

        needed = await composer.estimate_total_energy(Network.MAINNET, tx)
        breakdown = await composer.compute_fee(
            Network.MAINNET, tx, available_energy=available, available_bandwidth=1_000
        )

        energy_entry = breakdown.find("ENERGY")
        consumed = energy_entry.amount if energy_entry else Decimal("0")
        overage_trx = breakdown.native_total()
        overage = overage_trx * NativeToken.SUN_PER_TRX / Decimal("100")

        assert consumed <= available
        assert consumed + overage == needed


class TestActivationSurcharge:
    """활성화 수수료"""

    @pytest.mark.asyncio
    async def test_surcharge_even_when_resources_cover(self, composer, transfer_tx) -> None:
        """리소스가 충분해도 미활성 수신자면 TRX 항목"""
        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx("TNew"), available_energy=0, available_bandwidth=1_000
        )

        assert _units(breakdown) == ["BANDWIDTH", "TRX"]
        assert breakdown.native_total() == Decimal("1")

    @pytest.mark.asyncio
    async def test_surcharge_added_to_overage(self, composer, transfer_tx) -> None:
        """초과분 + 활성화 수수료"""
        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx("TNew"), available_energy=0, available_bandwidth=0
        )

        assert breakdown.native_total() == Decimal("1.2")

    @pytest.mark.asyncio
    async def test_probe_failure_charges_surcharge(self, composer, ledger, transfer_tx) -> None:
        """확인 실패는 미활성으로 간주"""
        ledger.activate("TReceiver")
        ledger.state.fail_account_probe = True

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=1_000
        )

        assert breakdown.native_total() == Decimal("1")


class TestChainParameters:
    """단가 조회"""

    @pytest.mark.asyncio
    async def test_no_overage_no_fetch(self, composer, ledger, transfer_tx) -> None:
        """초과분이 없으면 파라미터 조회 없음"""
        ledger.activate("TReceiver")
        ledger.state.fail_parameters = True

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=1_000
        )

        assert _units(breakdown) == ["BANDWIDTH"]
        assert ledger.state.calls["get_chain_parameters"] == 0

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, composer, ledger, transfer_tx) -> None:
        """초과분 과금 시 조회 실패는 ParameterFetchFailed"""
        ledger.activate("TReceiver")
        ledger.state.fail_parameters = True

        with pytest.raises(ParameterFetchFailed):
            await composer.compute_fee(
                Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=0
            )

    @pytest.mark.asyncio
    async def test_failure_cancels_pending_probes(
        self, composer, ledger, build_tx, make_transfer, make_trigger
    ) -> None:
        """계산 실패 시 진행 중인 활성화 확인은 취소되고 이후에도 완료되지 않음"""
        ledger.state.fail_simulation = True
        ledger.state.fail_parameters = True
        ledger.state.probe_delay = 0.2
        tx = build_tx([make_trigger("TContract"), make_transfer("TNew")])

        with pytest.raises(ParameterFetchFailed):
            await composer.compute_fee(
                Network.MAINNET,
                tx,
                available_energy=0,
                available_bandwidth=0,
                fee_limit=15_000_000,
            )

        assert ledger.state.calls["account_exists"] == 1
        await asyncio.sleep(0.3)
        assert ledger.state.calls["account_exists:done"] == 0

    @pytest.mark.asyncio
    async def test_missing_price_keys_use_defaults(self, composer, ledger, trigger_tx) -> None:
        """단가 키가 없으면 기본 단가 (1000 / 100 SUN)"""
        ledger.set_parameters(Network.MAINNET, {ChainParameterKeys.MAINTENANCE_INTERVAL: 21_600_000})
        ledger.set_simulation("TContract", energy_used=10_000)

        breakdown = await composer.compute_fee(
            Network.MAINNET, trigger_tx(), available_energy=0, available_bandwidth=0
        )

        # 10000 * 100 + 200 * 1000 = 1_200_000 SUN
        assert breakdown.native_total() == Decimal("1.2")

    @pytest.mark.asyncio
    async def test_native_total_matches_recomputation(self, composer, ledger, build_tx, make_transfer, make_trigger) -> None:
        """TRX 총액 == 초과분 × 단가 + 활성화 수수료 (독립 재계산)"""
        ledger.set_parameters(
            Network.MAINNET,
            {
                ChainParameterKeys.BANDWIDTH_PRICE: 1_000,
                ChainParameterKeys.ENERGY_PRICE: 420,
            },
        )
        ledger.set_simulation("TContract", energy_used=64_285)
        tx = build_tx([make_trigger("TContract"), make_transfer("TNew")], raw_bytes=150)

        breakdown = await composer.compute_fee(
            Network.MAINNET, tx, available_energy=50_000, available_bandwidth=100
        )

        bandwidth_needed = 150 + 65 + 64 + 5
        energy_overage = 64_285 - 50_000
        expected = (
            Decimal(bandwidth_needed * 1_000 + energy_overage * 420) / Decimal(1_000_000)
            + Decimal("1")
        )
        assert breakdown.native_total() == expected
        assert breakdown.find("ENERGY").amount == Decimal("50000")
        assert breakdown.find("BANDWIDTH") is None

        # 같은 입력, 같은 파라미터 → 같은 결과
        again = await composer.compute_fee(
            Network.MAINNET, tx, available_energy=50_000, available_bandwidth=100
        )
        assert again == breakdown


class TestComposition:
    """항목 구성 및 수치 처리"""

    @pytest.mark.asyncio
    async def test_all_covered_no_native_entry(self, composer, ledger, trigger_tx) -> None:
        """전부 리소스로 충당 → TRX 항목 없음"""
        ledger.set_simulation("TContract", energy_used=30_000)

        breakdown = await composer.compute_fee(
            Network.MAINNET, trigger_tx(), available_energy=100_000, available_bandwidth=1_000
        )

        assert _units(breakdown) == ["ENERGY", "BANDWIDTH"]
        assert all(entry.kind == FeeKind.RESOURCE for entry in breakdown)

    @pytest.mark.asyncio
    async def test_truncation_not_rounding(self, ledger, parameter_cache, transfer_tx) -> None:
        """TRX 는 6자리 절사"""
        composer = FeeComposer(
            simulation_client=ledger,
            contract_info_client=ledger,
            account_probe=ledger,
            parameter_cache=parameter_cache,
            defaults=FeeDefaults(activation_fee_trx=Decimal("1.0000009")),
        )

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx("TNew"), available_energy=0, available_bandwidth=1_000
        )

        assert breakdown.native_total() == Decimal("1.000000")

    @pytest.mark.asyncio
    async def test_unknown_contract_conservative(self, composer, ledger, build_tx) -> None:
        """알 수 없는 contract 는 130000 Energy, 시뮬레이션 호출 없음"""
        tx = build_tx([{"type": "CreateSmartContract", "parameter": {"value": {}}}])

        breakdown = await composer.compute_fee(
            Network.MAINNET, tx, available_energy=200_000, available_bandwidth=1_000
        )

        assert breakdown.find("ENERGY").amount == Decimal("130000")
        assert ledger.state.calls["simulate_call"] == 0

    @pytest.mark.asyncio
    async def test_unrecognized_type_name(self, composer, build_tx) -> None:
        """목록에 없는 타입 이름도 보수적 추정 (에러 아님)"""
        tx = build_tx([{"type": "TeleportContract", "parameter": {"value": {}}}])

        energy = await composer.estimate_total_energy(Network.MAINNET, tx)

        assert energy == Decimal("130000")

    @pytest.mark.asyncio
    async def test_multi_operation_energy_sum(self, composer, ledger, build_tx, make_trigger) -> None:
        """Operation 별 Energy 합"""
        ledger.set_simulation("TA", energy_used=10_000)
        ledger.set_simulation("TB", energy_used=20_000)
        ledger.set_contract("TB", caller_resource_percent=50, deployer_subsidy_limit=5_000)
        tx = build_tx([make_trigger("TA"), make_trigger("TB")])

        energy = await composer.estimate_total_energy(Network.MAINNET, tx)

        # TB: caller 15000
        assert energy == Decimal("25000")

    @pytest.mark.asyncio
    async def test_simulation_fallback_with_fee_limit(self, composer, ledger, trigger_tx) -> None:
        """시뮬레이션 실패 + fee_limit → floor(fee_limit / 단가)"""
        ledger.state.fail_simulation = True

        breakdown = await composer.compute_fee(
            Network.MAINNET,
            trigger_tx(),
            available_energy=0,
            available_bandwidth=1_000,
            fee_limit=15_000_000,
        )

        # 15_000_000 / 100 = 150000 energy → 15 TRX
        assert breakdown.native_total() == Decimal("15")

    @pytest.mark.asyncio
    async def test_network_asset_ids(self, composer, ledger, trigger_tx) -> None:
        """항목 자산 ID 는 요청 네트워크 기준"""
        ledger.set_simulation("TContract", energy_used=130_000)

        breakdown = await composer.compute_fee(
            Network.NILE, trigger_tx(), available_energy=1, available_bandwidth=1_000
        )

        assert [entry.asset_id for entry in breakdown] == [
            Network.NILE.energy_asset_id,
            Network.NILE.bandwidth_asset_id,
            Network.NILE.native_asset_id,
        ]

    @pytest.mark.asyncio
    async def test_to_list_for_ui(self, composer, ledger, transfer_tx) -> None:
        """UI 전달 형식"""
        ledger.activate("TReceiver")

        breakdown = await composer.compute_fee(
            Network.MAINNET, transfer_tx(), available_energy=0, available_bandwidth=0
        )

        assert breakdown.to_list() == [
            {
                "type": "base",
                "asset": {
                    "unit": "TRX",
                    "type": Network.MAINNET.native_asset_id,
                    "amount": "0.200000",
                    "fungible": True,
                },
            }
        ]
