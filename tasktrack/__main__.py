from tasktrack.main import main

main()
