from setuptools import setup, find_packages

setup(
    name="careercoach",
    version="0.1.0",
    packages=find_packages(include=["careercoach", "careercoach.*", "coach", "coach.*"]),
    include_package_data=True,
    package_data={"coach": ["templates/coach/*.html"]},
    install_requires=[
        "Django>=5.0",
        "djangorestframework>=3.15",
        "django-cors-headers>=4.3",
        "whitenoise>=6.6",
        "python-dotenv>=1.0",
        "requests>=2.31",
        "openai>=1.30",
        "PyJWT[crypto]>=2.8",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-django>=4.8",
        ],
    },
    author="Wayne",
    author_email="support@techwithwayne.com",
    description="Career coaching site for Django: onboarding, cached industry insights, resumes and cover letters.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://techwithwayne.com",
    license="MIT",
    classifiers=[
        "Framework :: Django",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License"
    ],
    python_requires='>=3.10',
)
