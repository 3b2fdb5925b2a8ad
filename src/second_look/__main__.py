from second_look import main

main()
