# ==================================================
# examples/build_blob.py
# ==================================================
import argparse, os
from shader_blob import BlobWriter, FileSink, ShaderBlobFile

def main():
    p = argparse.ArgumentParser()
    p.add_argument("blob", help="path to output blob")
    p.add_argument("count", type=int)
    args = p.parse_args()

    with open(args.blob, "wb") as f:
        writer = BlobWriter(FileSink(f))
        writer.write_header()
        for i in range(args.count):
            consts = {"QUALITY": str(i % 4), "VARIANT": str(i)}
            writer.add(consts, f"binary_{i}".encode() + os.urandom(8))

    with ShaderBlobFile(args.blob) as blob:
        for key in blob.permutations():
            print(key)

if __name__ == "__main__":
    main()
