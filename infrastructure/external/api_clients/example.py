"""httpbin 客户端示例：演示 set_headers/clear 钩子与调试模式"""
from typing import Optional

from .base import BaseAPIClient, HTTPMethod, is_response_error


class HttpBinClient(BaseAPIClient):
    """Minimal client for https://httpbin.org."""

    def __init__(self, token: Optional[str] = None, **kwargs):
        kwargs.setdefault("base_uri", "https://httpbin.org")
        super().__init__(**kwargs)
        self.token = token

    def set_headers(self) -> None:
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"

    def get_status(self, code: int):
        return self.build_request(f"/status/{code}").fetch()

    def get_args(self, **params):
        return self.build_request("/get", params).fetch()

    def post_json(self, payload: dict):
        return self.build_request("/post", payload, HTTPMethod.POST).fetch()

    def delete_anything(self, path: str):
        return self.request(f"/anything/{path}", method=HTTPMethod.DELETE)


def main():
    with HttpBinClient() as client:
        print("= 成功示例 =")
        print(client.get_args(q="python", page=1, empty=""))

        print("\n= 错误示例 (请求 418) =")
        result = client.get_status(418)
        if is_response_error(result):
            print(f"ResponseError: {result.message}")

    print("\n= 调试模式 (请求 418) =")
    with HttpBinClient(debug_mode=True) as client:
        print(f"原始响应体: {client.get_status(418)!r}")


if __name__ == "__main__":
    main()
