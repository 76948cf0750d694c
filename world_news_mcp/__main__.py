import sys

from world_news_mcp.main import main

sys.exit(main())
