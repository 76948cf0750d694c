"""
Manual smoke test against the real World News API.

Spawns the stdio server, lists the tools and runs one search. Responses are
matched to requests by id, so no sleeps are needed.

Usage:
    WORLD_NEWS_API_KEY=... python scripts/smoke_stdio.py
"""

import asyncio
import json
import os
import sys

REQUESTS = [
    {
        "jsonrpc": "2.0",
        "id": 0,
        "method": "initialize",
        "params": {"protocolVersion": "2024-11-05", "capabilities": {}, "clientInfo": {"name": "smoke", "version": "0"}},
    },
    {"jsonrpc": "2.0", "method": "notifications/initialized"},
    {"jsonrpc": "2.0", "id": 1, "method": "tools/list", "params": {}},
    {
        "jsonrpc": "2.0",
        "id": 2,
        "method": "tools/call",
        "params": {"name": "search_news", "arguments": {"text": "technology", "language": "en", "number": 3}},
    },
]


def print_result(title, response):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)

    if "error" in response:
        print("Error:", response["error"])
        return

    result = response["result"]
    if "tools" in result:
        print(f"Found {len(result['tools'])} tools:")
        for index, tool in enumerate(result["tools"], start=1):
            print(f"  {index}. {tool['name']}: {tool['description']}")
    elif "content" in result:
        content = json.loads(result["content"][0]["text"])
        news = content.get("news") or []
        print(f"Found {len(news)} news articles:")
        for index, article in enumerate(news, start=1):
            print(f"  {index}. {article.get('title') or 'No title'}")
            print(f"     Published: {article.get('publish_date') or 'Unknown'}")
    else:
        print("Result:", result)


async def main() -> int:
    if not os.getenv("WORLD_NEWS_API_KEY"):
        print("WORLD_NEWS_API_KEY environment variable is not set", file=sys.stderr)
        return 1

    proc = await asyncio.create_subprocess_exec(
        sys.executable, "-m", "world_news_mcp", "stdio",
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        env={**os.environ},
    )

    pending = {req["id"] for req in REQUESTS if "id" in req}
    for req in REQUESTS:
        proc.stdin.write((json.dumps(req) + "\n").encode())
    await proc.stdin.drain()

    titles = {0: "Handshake", 1: "Test 1: tools/list", 2: "Test 2: search_news (technology)"}
    while pending:
        line = await asyncio.wait_for(proc.stdout.readline(), timeout=60)
        if not line:
            print("Server closed stdout early", file=sys.stderr)
            return 1
        response = json.loads(line)
        pending.discard(response.get("id"))
        print_result(titles.get(response.get("id"), f"id={response.get('id')}"), response)

    proc.stdin.close()
    await proc.wait()
    print("\nSmoke test completed.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
