from slack_mcp.main import main

main()
