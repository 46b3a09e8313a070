from taskapi.cli import cli


def main():
    """Main entry point for taskapi."""
    cli()

if __name__ == '__main__':
    main()
