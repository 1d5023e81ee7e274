'''Reusable parts of election evaluators.'''
