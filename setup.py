from setuptools import setup, find_packages

setup(name='barlayout',
      version="0.1",
      description='Pixel geometry for bar charts: bar rectangles and data label placement',
      long_description='',
      author='Paul',
      author_email='paulxiep@outlook.com',
      url='',
      packages=find_packages(include=['barlayout', 'barlayout.*']),
      python_requires='>=3.9',
      install_requires=[
          "pandas>=2.0",
          "matplotlib>=3.7"
      ],
      extras_require={
          "test": ["pytest>=7.0"]
      },
      license='Private',
      zip_safe=False,
      keywords='',
      classifiers=[''])
