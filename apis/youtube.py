import requests
from typing import Any, Dict, Optional


BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}


def build_session(proxy: Optional[str] = None,
                  headers: Optional[Dict[str, str]] = None) -> requests.Session:
    """
    ブラウザ風ヘッダー付きのセッションを作成する

    Args:
        proxy (Optional[str]): 全リクエストを経由させるプロキシURL
        headers (Optional[Dict[str, str]]): 既定のブラウザヘッダーを置き換える場合に指定

    Returns:
        requests.Session: 設定済みセッション
    """
    session = requests.Session()
    session.headers.update(headers if headers is not None else BROWSER_HEADERS)
    if proxy:
        # http/https どちらも同じプロキシを通す
        session.proxies.update({"http": proxy, "https": proxy})
    return session


def get(session: requests.Session, url: str) -> requests.Response:
    """
    GETリクエストを送信する（ステータスの判定は呼び出し側で行う）

    Args:
        session (requests.Session): build_session で作成したセッション
        url (str): 取得するURL

    Returns:
        requests.Response: レスポンス
    """
    return session.get(url)


def post_json(session: requests.Session, url: str, payload: Dict[str, Any]) -> requests.Response:
    """
    JSONボディでPOSTリクエストを送信する

    Args:
        session (requests.Session): build_session で作成したセッション
        url (str): 送信先URL
        payload (Dict[str, Any]): JSONとして送るボディ

    Returns:
        requests.Response: レスポンス
    """
    return session.post(url, json=payload, headers={"Content-Type": "application/json"})
