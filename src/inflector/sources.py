from functools import cache
from importlib import resources

class RuleDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Built-in English rules """
        return resources.files('inflector.data').joinpath('en.yaml')

class IrregularDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        return resources.files('inflector.data').joinpath('irregulars.csv')

class ApproximationDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        """ Latin characters and their ASCII approximations """
        return resources.files('inflector.data').joinpath('approximations.csv')
