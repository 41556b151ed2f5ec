from setuptools import find_packages, setup
import glob
import os

package_name = 'drone_teleop'

data_files = [
    ('share/ament_index/resource_index/packages',
     [f'resource/{package_name}']),
    ('share/' + package_name,
     ['package.xml']),
    (os.path.join('share', package_name, 'launch'),
     glob.glob('launch/*.py')),
    (os.path.join('share', package_name, 'config'),
     glob.glob('config/*.yaml')),
]

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=data_files,
    install_requires=['setuptools', 'rich'],
    zip_safe=True,
    maintainer='TTD',
    maintainer_email='ttd@flyscan.com',
    description='Keyboard teleoperation for MAVROS drones (GUIDED velocity, arm, takeoff, land)',
    license='Apache License 2.0',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            "teleop_drone = drone_teleop.teleop_node:main",
        ],
    },
)
