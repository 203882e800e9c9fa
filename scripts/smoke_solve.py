#!/usr/bin/env python3
"""
起動中の Core API に対して解答フローを確認するスモークテスト
実行方法: cd core && python main.py を起動したうえで python scripts/smoke_solve.py
"""

import sys

import requests

from dost.client.submission_client import SubmissionClient
from dost.models.solve import SolutionResult

# APIエンドポイント設定
CORE_API_URL = "http://localhost:1234"

def check_health() -> bool:
    """Core APIのヘルスチェック"""
    try:
        response = requests.get(f"{CORE_API_URL}/health")
        print(f"✅ Core API Health Check: {response.status_code}")
        print(f"   Response: {response.json()}")
        return response.ok
    except requests.RequestException as e:
        print(f"❌ Core API Health Check Failed: {e}")
        return False

def check_solve(problem: str, expected: str) -> bool:
    """SubmissionClient 経由で解答を取得し、期待する文言が含まれるか確認"""
    client = SubmissionClient(base_url=CORE_API_URL)
    client.on_change(lambda c: print(f"   state -> {c.state.value}"))
    client.set_text(problem)

    outcome = client.submit()
    if isinstance(outcome, SolutionResult) and expected in outcome.content:
        print(f"✅ Solve: {problem!r} -> contains {expected!r}")
        return True
    print(f"❌ Solve: {problem!r} -> {outcome}")
    return False

def check_method_not_allowed() -> bool:
    response = requests.get(f"{CORE_API_URL}/api/solve")
    ok = response.status_code == 405
    print(f"{'✅' if ok else '❌'} GET /api/solve: {response.status_code} {response.json()}")
    return ok

def main() -> int:
    print("🚀 解答フローのスモークテストを開始します\n")

    if not check_health():
        print("❌ Core APIが起動していません。先にCore APIを起動してください。")
        print("   実行コマンド: cd core && python main.py")
        return 1

    tests = [
        ("Kinematics topic", check_solve("A ball is thrown with velocity 10 m/s.", "kinematics")),
        ("Circuits topic", check_solve("Find the resistance of the wire.", "electric circuits")),
        ("Mass known", check_solve("A car with mass 5kg accelerates...", "Mass (m) is provided")),
        ("Method not allowed", check_method_not_allowed()),
    ]

    passed = sum(1 for _, result in tests if result)
    print(f"\n🎯 テスト結果: {passed}/{len(tests)} 通過")
    return 0 if passed == len(tests) else 1

if __name__ == "__main__":
    sys.exit(main())
