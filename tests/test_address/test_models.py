"""Address 数据模型单元测试."""

import pytest

from elasticlink.address.exceptions import InvalidAddressError
from elasticlink.address.models import Address


class TestAddress:
    """Address 数据模型测试."""

    def test_str_without_port(self) -> None:
        """测试无端口时的字符串形式."""
        assert str(Address(scheme="http", host="example.com")) == "http://example.com"

    def test_str_with_port_and_path(self) -> None:
        """测试带端口和路径前缀的字符串形式."""
        address = Address(scheme="https", host="example.com", port=9243, path="/es")
        assert str(address) == "https://example.com:9243/es"
        assert address.netloc == "example.com:9243"

    def test_effective_port_defaults(self) -> None:
        """测试未指定端口时按协议取默认端口."""
        assert Address(scheme="http", host="h").effective_port == 80
        assert Address(scheme="https", host="h").effective_port == 443
        assert Address(scheme="http", host="h", port=9200).effective_port == 9200

    def test_effective_port_unknown_scheme(self) -> None:
        """测试未知协议且无端口时返回 None."""
        assert Address(scheme="ftp", host="h").effective_port is None

    def test_hashable_and_equal(self) -> None:
        """测试地址可哈希且按值相等."""
        a = Address(scheme="http", host="h", port=9200)
        b = Address(scheme="http", host="h", port=9200)
        assert a == b
        assert len({a, b}) == 1

    def test_empty_scheme_raises_error(self) -> None:
        """测试空协议抛出 InvalidAddressError."""
        with pytest.raises(InvalidAddressError, match="missing protocol scheme"):
            Address(scheme="", host="h")

    def test_empty_host_raises_error(self) -> None:
        """测试空主机抛出 InvalidAddressError."""
        with pytest.raises(InvalidAddressError, match="missing host"):
            Address(scheme="http", host="")
