from weatherbar.cli import entrypoint

entrypoint()
