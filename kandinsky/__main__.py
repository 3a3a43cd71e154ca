from kandinsky.cli import main

main()
