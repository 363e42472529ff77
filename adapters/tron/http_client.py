"""
TRON Full Node HTTP 클라이언트

TronGrid /wallet/* 엔드포인트 호출.
ILedgerSimulationClient, ILedgerContractInfoClient,
ILedgerAccountProbe, ILedgerParameterClient Protocol 준수.
"""

import logging
from typing import Any

import httpx

from adapters.models import (
    ChainParameter,
    ContractSubsidyInfo,
    SimulationRequest,
    SimulationResult,
)
from adapters.tron.errors import TronApiError
from adapters.tron.models import (
    build_simulation_body,
    parse_account_exists,
    parse_chain_parameters,
    parse_contract_info,
    parse_simulation_result,
)
from core.constants import Defaults, TronEndpoints
from core.types import Network

logger = logging.getLogger(__name__)


class TronHttpClient:
    """TRON Full Node HTTP 클라이언트

    네트워크별 base URL로 요청을 라우팅.
    재시도하지 않음 (실패 시 엔진이 보수적 폴백 적용).

    Args:
        base_urls: 네트워크별 base URL (None이면 TronGrid 기본값)
        api_key: TRON-PRO-API-KEY 헤더 값 (선택)
        timeout: 요청 타임아웃 (초)
    """

    def __init__(
        self,
        base_urls: dict[Network, str] | None = None,
        api_key: str | None = None,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
    ):
        urls = dict(TronEndpoints.BASE_URLS)
        if base_urls:
            urls.update(base_urls)
        self.base_urls = {network: url.rstrip("/") for network, url in urls.items()}
        self.api_key = api_key
        self.timeout = timeout

        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["TRON-PRO-API-KEY"] = self.api_key
        return headers

    async def _request(
        self,
        method: str,
        scope: Network,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST)
            scope: 네트워크
            path: API 경로 (예: /wallet/getaccount)
            body: JSON 본문 (POST)

        Returns:
            JSON 응답 (객체)

        Raises:
            TronApiError: 에러 응답 또는 설정되지 않은 네트워크
            httpx.TimeoutException, httpx.RequestError: 네트워크 오류
        """
        base_url = self.base_urls.get(scope)
        if base_url is None:
            raise TronApiError(
                status_code=0,
                message=f"설정되지 않은 네트워크입니다: {scope.value}",
                path=path,
            )

        url = f"{base_url}{path}"
        client = await self._get_client()

        try:
            response = await client.request(
                method,
                url,
                json=body,
                headers=self._headers(),
            )
        except httpx.TimeoutException:
            logger.warning(
                "TRON API timeout",
                extra={"path": path, "network": scope.value},
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "TRON API request error",
                extra={"path": path, "network": scope.value, "error": str(e)},
            )
            raise

        if response.status_code >= 400:
            raise TronApiError(
                status_code=response.status_code,
                message=response.text,
                path=path,
            )

        data = response.json()
        if not isinstance(data, dict):
            raise TronApiError(
                status_code=response.status_code,
                message=f"예상하지 못한 응답 형식: {type(data).__name__}",
                path=path,
            )

        # 원장은 일부 오류를 200 + {"Error": "..."} 로 반환
        if "Error" in data:
            raise TronApiError(
                status_code=response.status_code,
                message=str(data["Error"]),
                path=path,
            )

        return data

    # -------------------------------------------------------------------------
    # ILedgerSimulationClient
    # -------------------------------------------------------------------------

    async def simulate_call(
        self,
        scope: Network,
        request: SimulationRequest,
    ) -> SimulationResult:
        """컨트랙트 상수 호출 시뮬레이션

        @see https://developers.tron.network/reference/triggerconstantcontract
        """
        data = await self._request(
            "POST",
            scope,
            TronEndpoints.TRIGGER_CONSTANT_CONTRACT,
            build_simulation_body(request),
        )
        return parse_simulation_result(data)

    # -------------------------------------------------------------------------
    # ILedgerContractInfoClient
    # -------------------------------------------------------------------------

    async def get_contract_info(
        self,
        scope: Network,
        contract_address: str,
        visible: bool = False,
    ) -> ContractSubsidyInfo | None:
        """컨트랙트 Energy 분담 설정 조회

        @see https://developers.tron.network/reference/getcontract
        """
        data = await self._request(
            "POST",
            scope,
            TronEndpoints.GET_CONTRACT,
            {"value": contract_address, "visible": visible},
        )
        return parse_contract_info(data)

    # -------------------------------------------------------------------------
    # ILedgerAccountProbe
    # -------------------------------------------------------------------------

    async def account_exists(
        self,
        scope: Network,
        address: str,
        visible: bool = False,
    ) -> bool:
        """주소 활성화 여부 확인

        @see https://developers.tron.network/reference/walletgetaccount
        """
        data = await self._request(
            "POST",
            scope,
            TronEndpoints.GET_ACCOUNT,
            {"address": address, "visible": visible},
        )
        return parse_account_exists(data)

    # -------------------------------------------------------------------------
    # ILedgerParameterClient
    # -------------------------------------------------------------------------

    async def get_chain_parameters(self, scope: Network) -> list[ChainParameter]:
        """체인 파라미터 조회

        @see https://developers.tron.network/reference/wallet-getchainparameters
        """
        data = await self._request(
            "GET",
            scope,
            TronEndpoints.GET_CHAIN_PARAMETERS,
        )
        return parse_chain_parameters(data)
