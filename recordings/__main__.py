from recordings.main import main

main()
