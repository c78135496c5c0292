from cxxrun.frontend import console


if __name__ == '__main__':
    console()
