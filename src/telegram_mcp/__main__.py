from telegram_mcp.cli import main

main()
