import asyncio

from sdk.logging_config import setup_logging
from sdk.orchestrator import FetchOrchestrator


async def main():
    setup_logging(verbose=True)
    o = FetchOrchestrator(on_change=lambda s: print(
        f"  state -> loading={s.loading} products={len(s.products)} "
        f"error={s.error.kind.value if s.error else None}"
    ))

    # Start a fetch, then retry before it can finish: the first one is superseded
    print("\n⚡ Fetch followed immediately by a retry...")
    first = asyncio.create_task(o.fetch())
    await asyncio.sleep(0)
    second = await o.retry()
    stale = await first

    print(f"\n🗑️  first request result: {stale!r} (discarded)")
    print(f"✅ second request result ok={second.ok if second else None}")
    print(f"📦 Final state: {len(o.state.products)} products, error={o.state.error}")


if __name__ == "__main__":
    asyncio.run(main())
