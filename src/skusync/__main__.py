from skusync.ui.cli import run

run()
