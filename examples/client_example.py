"""传输核心客户端使用示例.

本文件展示了如何使用 Client 进行地址解析、重试调度、产品校验与指标统计。
"""

import logging

from elasticlink import (
    Client,
    ClientConfig,
    ConnectionConfig,
    ElasticLinkError,
    Request,
    UnrecognizedProductError,
)

logging.basicConfig(level=logging.INFO)


# ==================== 示例1：多节点 + 重试 ====================
def example_multi_node():
    """在多个节点之间轮询，失败时重试."""
    config = ClientConfig(
        addresses=["http://node1:9200", "http://node2:9200/"],
        max_retries=2,
        retry_backoff=lambda retry: 0.5 * retry,  # 第 n 次重试等待 0.5n 秒
        enable_metrics=True,
    )
    with Client(config, connection_config=ConnectionConfig(request_timeout=10)) as client:
        response = client.perform(Request("GET", "/_cat/indices?format=json"))
        print(f"状态码: {response.status}")
        print(f"产品校验: {client.product_check_success}")
        print(f"指标: {client.metrics()}")


# ==================== 示例2：Cloud ID ====================
def example_cloud_id():
    """使用 Cloud ID 连接云上部署."""
    config = ClientConfig(cloud_id="my-deployment:YmFyLmNsb3VkLmVzLmlvJGFiYzEyMyRkZWY0NTY=")
    with Client(config) as client:
        print(f"派生地址: {[str(u) for u in client.urls()]}")


# ==================== 示例3：错误处理 ====================
def example_error_handling():
    """区分产品校验失败与其它错误."""
    try:
        with Client.from_env() as client:
            client.perform(Request("GET", "/"))
    except UnrecognizedProductError as e:
        print(f"远端不是 Elasticsearch: {e}")
    except ElasticLinkError as e:
        print(f"请求失败: {e}")


if __name__ == "__main__":
    example_cloud_id()
    example_multi_node()
    example_error_handling()
