from git_emoji_commit.cli.main import run

if __name__ == "__main__":
    run()
