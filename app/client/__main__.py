from app.client.console import main

main()
