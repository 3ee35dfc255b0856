from script_sanitizer.cli import main

main()
