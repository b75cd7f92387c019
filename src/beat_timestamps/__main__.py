from beat_timestamps.main import main

main()
