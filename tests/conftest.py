import os

# Qt must not need a display when tests touch QtCore objects
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
