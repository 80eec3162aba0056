from o3_search_mcp.main import main

main()
