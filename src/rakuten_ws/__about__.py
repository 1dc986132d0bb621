__version__ = "0.1.0"
__description__ = "Declarative resource types for the Rakuten Web Service API"
