"""数据模型（ClientConfig、ConnectionConfig）单元测试."""

import pytest

from elasticlink.connection.exceptions import ConnectionConfigError
from elasticlink.connection.models import (
    DEFAULT_RETRY_ON_STATUS,
    ClientConfig,
    ConnectionConfig,
)


class TestClientConfig:
    """ClientConfig 数据模型测试."""

    # --- 正常创建 ---

    def test_default_values(self) -> None:
        """测试默认值."""
        config = ClientConfig()
        assert config.addresses == []
        assert config.cloud_id is None
        assert config.transport is None
        assert config.enable_retry is True
        assert config.max_retries == 3
        assert config.retry_on_status == frozenset({502, 503, 504})
        assert config.retry_on_timeout is True
        assert config.retry_backoff is None
        assert config.enable_metrics is False
        assert config.persist_cursor is True
        assert config.product_info_fallback is False

    def test_create_with_addresses(self) -> None:
        """测试使用地址列表创建配置."""
        config = ClientConfig(addresses=["http://node1:9200", "http://node2:9200"])
        assert config.addresses == ["http://node1:9200", "http://node2:9200"]

    def test_retry_on_status_converted_to_frozenset(self) -> None:
        """测试 retry_on_status 被转换为 frozenset."""
        config = ClientConfig(retry_on_status=[429, 503])
        assert config.retry_on_status == frozenset({429, 503})

    def test_default_retry_statuses_not_shared_mutable(self) -> None:
        """测试默认状态码集合不可变."""
        assert isinstance(DEFAULT_RETRY_ON_STATUS, frozenset)

    def test_zero_retries_allowed(self) -> None:
        """测试 max_retries 为 0 合法."""
        assert ClientConfig(max_retries=0).max_retries == 0

    # --- 参数校验 ---

    def test_negative_max_retries_raises_error(self) -> None:
        """测试 max_retries 小于 0 抛出异常."""
        with pytest.raises(ConnectionConfigError, match="max_retries 必须 >= 0"):
            ClientConfig(max_retries=-1)

    def test_invalid_status_raises_error(self) -> None:
        """测试非法状态码抛出异常."""
        with pytest.raises(ConnectionConfigError, match="非法值: \\[42, 600\\]"):
            ClientConfig(retry_on_status={502, 42, 600})

    def test_non_int_status_raises_error(self) -> None:
        """测试非整数状态码抛出 ConnectionConfigError 而不是 TypeError."""
        with pytest.raises(ConnectionConfigError, match="非法值"):
            ClientConfig(retry_on_status={"502"})

    def test_bool_status_raises_error(self) -> None:
        """测试布尔值不被当作状态码."""
        with pytest.raises(ConnectionConfigError, match="非法值"):
            ClientConfig(retry_on_status={True, 502})


class TestConnectionConfig:
    """ConnectionConfig 数据模型测试."""

    def test_default_values(self) -> None:
        """测试默认值."""
        config = ConnectionConfig()
        assert config.connections_per_node == 10
        assert config.request_timeout == 30
        assert config.http_compress is False
        assert config.verify_certs is True
        assert config.ca_certs is None

    def test_custom_values(self) -> None:
        """测试自定义值."""
        config = ConnectionConfig(connections_per_node=20, request_timeout=60)
        assert config.connections_per_node == 20
        assert config.request_timeout == 60

    def test_zero_timeout_allowed(self) -> None:
        """测试 request_timeout 为 0 合法."""
        assert ConnectionConfig(request_timeout=0).request_timeout == 0

    def test_invalid_connections_per_node_raises_error(self) -> None:
        """测试 connections_per_node 小于 1 抛出异常."""
        with pytest.raises(ConnectionConfigError, match="connections_per_node 必须 >= 1"):
            ConnectionConfig(connections_per_node=0)

    def test_negative_timeout_raises_error(self) -> None:
        """测试 request_timeout 小于 0 抛出异常."""
        with pytest.raises(ConnectionConfigError, match="request_timeout 必须 >= 0"):
            ConnectionConfig(request_timeout=-1)
