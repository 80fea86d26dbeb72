from gitlab_mr.cli import main

main()
